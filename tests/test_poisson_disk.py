import math

import numpy as np
import pytest

from colorful.ArrayRandom import ArrayRandom
from colorful.PoissonDisk import PoissonDisk


#truncating float points to cells moves each axis by less than one cell
TRUNCATION_SLACK = math.sqrt(2.0)


def _pairwise_min(points):
	points = np.asarray(points, dtype=float)
	diff = points[:, None, :] - points[None, :, :]
	dists = np.sqrt((diff**2).sum(axis=-1))
	dists[np.diag_indices(len(points))] = np.inf
	return dists.min()


def test_rectangle_points_are_separated_and_contained() -> None:
	result = PoissonDisk.sample((0, 0), (9, 9), 3.0, 10, 10, 20, ArrayRandom(1))

	assert len(result.points) > 1
	assert _pairwise_min(result.points) >= 3.0 - 1e-9
	assert (result.points >= 0.0).all()
	assert (result.points < 10.0).all()

	cells = PoissonDisk.stampPoints(result.stamp)
	assert len(cells) == len(result.points)
	assert _pairwise_min(cells) >= 3.0 - TRUNCATION_SLACK
	assert (cells >= 0).all()
	assert (cells[:, 0] < 10).all() and (cells[:, 1] < 10).all()


def test_stamp_holds_acceptance_order() -> None:
	result = PoissonDisk.sample((0, 0), (31, 31), 3.0, 32, 32, 20, ArrayRandom(5))

	values = np.sort(result.stamp[result.stamp > 0])
	assert values.tolist() == list(range(1, len(result.points) + 1))

	#every point stamps its truncated cell with its 1-based position
	for order, (x, y) in enumerate(result.points, start=1):
		assert result.stamp[int(x), int(y)] == order


def test_seed_is_region_center() -> None:
	result = PoissonDisk.sample((2, 4), (11, 9), 3.0, 20, 20, 10, ArrayRandom(3))

	assert tuple(result.points[0]) == (2 + 10 * 0.5, 4 + 6 * 0.5)
	assert result.stamp[7, 7] == 1
	assert tuple(PoissonDisk.stampPoints(result.stamp)[0]) == (7, 7)


def test_circle_points_stay_within_radius() -> None:
	rand = ArrayRandom(11)
	stamp = PoissonDisk.sampleCircle((5, 5), 4.0, 2.0, 10, 10, rand=rand)

	cells = PoissonDisk.stampPoints(stamp)
	assert len(cells) > 1
	dists = np.sqrt(((cells - 5.0)**2).sum(axis=1))
	assert (dists <= 4.0 + TRUNCATION_SLACK).all()
	assert stamp[5, 5] == 1

	result = PoissonDisk.sample((1, 1), (9, 9), 2.0, 10, 10, 10, ArrayRandom(11), circle_center=(5, 5), circle_radius=4.0)
	float_dists = np.sqrt(((result.points - 5.0)**2).sum(axis=1))
	assert (float_dists <= 4.0 + 1e-9).all()
	assert _pairwise_min(result.points) >= 2.0 - 1e-9


def test_circle_points_exact_and_cells_within_slack_over_seeds() -> None:
	for seed in range(30):
		result = PoissonDisk.sample((1, 1), (9, 9), 2.0, 10, 10, 10, ArrayRandom(seed), circle_center=(5, 5), circle_radius=4.0)
		float_dists = np.sqrt(((result.points - 5.0)**2).sum(axis=1))
		assert (float_dists <= 4.0 + 1e-9).all()

		cells = PoissonDisk.stampPoints(result.stamp)
		cell_dists = np.sqrt(((cells - 5.0)**2).sum(axis=1))
		assert (cell_dists <= 4.0 + TRUNCATION_SLACK).all()


def test_circle_is_clipped_to_lattice() -> None:
	stamp = PoissonDisk.sampleCircle((2, 3), 10.0, 2.5, 8, 6, 15, ArrayRandom(4))

	assert stamp.shape == (8, 6)
	assert np.count_nonzero(stamp) > 1


def test_same_seed_gives_same_stamp() -> None:
	first = PoissonDisk.sampleRectangle((0, 0), (39, 29), 3.5, 40, 30, 12, ArrayRandom(1234))
	second = PoissonDisk.sampleRectangle((0, 0), (39, 29), 3.5, 40, 30, 12, ArrayRandom(1234))
	assert np.array_equal(first, second)

	first = PoissonDisk.sampleCircle((20, 15), 12, 3.0, 40, 30, 12, np.random.default_rng(99))
	second = PoissonDisk.sampleCircle((20, 15), 12, 3.0, 40, 30, 12, np.random.default_rng(99))
	assert np.array_equal(first, second)


def test_region_larger_than_distance_places_more_than_seed() -> None:
	for seed in range(10):
		stamp = PoissonDisk.sampleRectangle((0, 0), (5, 5), 3.0, 6, 6, 10, ArrayRandom(seed))
		assert np.count_nonzero(stamp) > 1


def test_region_smaller_than_distance_keeps_only_seed() -> None:
	stamp = PoissonDisk.sampleRectangle((0, 0), (1, 1), 3.0, 10, 10, 20, ArrayRandom(8))

	assert np.count_nonzero(stamp) == 1
	assert stamp[1, 1] == 1


def test_more_tries_pack_denser() -> None:
	sparse = PoissonDisk.sampleRectangle((0, 0), (63, 63), 4.0, 64, 64, 1, ArrayRandom(21))
	dense = PoissonDisk.sampleRectangle((0, 0), (63, 63), 4.0, 64, 64, 30, ArrayRandom(21))

	assert np.count_nonzero(dense) >= np.count_nonzero(sparse)


def test_tiny_distance_is_floored() -> None:
	result = PoissonDisk.sample((0, 0), (7, 7), 0.0, 8, 8, 10, ArrayRandom(2))

	assert len(result.points) > 1
	assert _pairwise_min(result.points) >= PoissonDisk.MIN_DISTANCE - 1e-9


def test_default_random_source() -> None:
	stamp = PoissonDisk.sampleRectangle((0, 0), (15, 15), 3.0, 16, 16)
	assert np.count_nonzero(stamp) > 1


@pytest.mark.parametrize(
	"min_pos, max_pos, max_x, max_y, points_per_try",
	[
		((0, 0), (9, 9), 0, 10, 10),
		((0, 0), (9, 9), 10, -1, 10),
		((5, 0), (5, 9), 10, 10, 10),
		((0, 9), (9, 2), 10, 10, 10),
		((0, 0), (9, 9), 10, 10, 0),
		((20, 20), (30, 30), 10, 10, 10),
	],
)
def test_invalid_rectangle_raises(min_pos, max_pos, max_x, max_y, points_per_try) -> None:
	with pytest.raises(ValueError):
		PoissonDisk.sampleRectangle(min_pos, max_pos, 3.0, max_x, max_y, points_per_try, ArrayRandom(0))


@pytest.mark.parametrize(
	"center, radius, max_x, max_y",
	[
		((5, 5), 0.0, 10, 10),
		((5, 5), -2.0, 10, 10),
		((5, 5), 0.4, 10, 10),
		((12, 5), 3.0, 10, 10),
		((5, 5), 3.0, 0, 0),
	],
)
def test_invalid_circle_raises(center, radius, max_x, max_y) -> None:
	with pytest.raises(ValueError):
		PoissonDisk.sampleCircle(center, radius, 2.0, max_x, max_y, 10, ArrayRandom(0))
