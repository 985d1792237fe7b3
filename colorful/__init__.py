"""
colorful api
"""
#shared
from .ArrayRandom import ArrayRandom
from .OkLab import OkLab
from .OkTools import OkTools
from .OkPacked import OkPacked

#poisson sampling
from .PoissonDisk import PoissonDisk, PoissonResult
from .PoissonStats import PoissonStats

#poisson_palette.py
from .PoissonPalette import PoissonPalette

__all__ = [
	"ArrayRandom",
	"OkLab",
	"OkPacked",
	"OkTools",
	"PoissonDisk",
	"PoissonPalette",
	"PoissonResult",
	"PoissonStats",
]
