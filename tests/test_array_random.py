import numpy as np
import pytest

from colorful.ArrayRandom import ArrayRandom


def test_same_seed_same_sequence() -> None:
	a = ArrayRandom(42)
	b = ArrayRandom(42)

	assert np.array_equal(a.randomInt((16,)), b.randomInt((16,)))
	assert a.random() == b.random()
	assert a.integers(1000) == b.integers(1000)


def test_seed_can_reproduce_time_seeded_instance() -> None:
	timed = ArrayRandom()
	copy = ArrayRandom(int(timed._seed))

	assert np.array_equal(timed.random((8,)), copy.random((8,)))


def test_random_is_unit_interval() -> None:
	values = ArrayRandom(7).random((4096,))

	assert values.shape == (4096,)
	assert (values >= 0.0).all()
	assert (values < 1.0).all()
	assert 0.4 < values.mean() < 0.6
	assert isinstance(ArrayRandom(7).random(), float)


def test_integers_stay_below_high() -> None:
	rand = ArrayRandom(9)
	values = rand.integers(5, (2000,))

	assert values.min() == 0
	assert values.max() == 4
	assert isinstance(rand.integers(3), int)
	assert rand.integers(1) == 0


def test_invalid_arguments() -> None:
	with pytest.raises(ValueError):
		ArrayRandom("seed")
	with pytest.raises(ValueError):
		ArrayRandom(1).integers(0)
