"""Palette of blue noise distributed colors on an OkLab chroma wheel"""
import numpy as np
from PIL import Image
from dataclasses import dataclass

import os
import argparse

from .ArrayRandom import ArrayRandom
from .OkLab import OkLab
from .OkPacked import OkPacked
from .OkTools import OkTools
from .PoissonDisk import PoissonDisk
from .PoissonStats import PoissonStats


class PoissonPalette:

	@dataclass
	class Preset:
		"""Preset for PoissonPalette"""
		VALID_SORTS = ("hue", "chroma", "stamp")

		palette_output: str = "palette.png" # (mandatory) full output file path

		lightness: float = 0.65 #OkLab L of every color
		wheel_radius: int = 64 #wheel radius in lattice cells
		min_dist: float = 8.0 #poisson distance in lattice cells
		points_per_try: int = 30
		max_chroma: float = 0.32 #chroma at the wheel edge

		limit_gamut: bool = False #True pulls out of gamut colors toward gray, False drops them
		sort: str = "hue" #"hue", "chroma" or "stamp" (acceptance order)
		reserve_transparent: int = 0

		seed: int = None #None = random seed, [0,UINT64_MAX] = set seeded

		logging: bool = False #Disables stats and some printing

		valid: bool = False

		def __post_init__(self):

			#var sanity checks
			self.lightness = min(max(float(self.lightness), 0.0), 1.0)
			self.reserve_transparent = max(0, min(1, int(self.reserve_transparent)) )

			if self.wheel_radius < 1:
				print("wheel_radius must be >= 1, using 64")
				self.wheel_radius = 64
			self.wheel_radius = int(self.wheel_radius)

			if self.points_per_try < 1:
				self.points_per_try = PoissonDisk.DEFAULT_POINTS_PER_TRY

			if self.max_chroma <= 0:
				print("max_chroma must be positive, using 0.32")
				self.max_chroma = 0.32
			if self.max_chroma > 1.0:
				print("max_chroma must be <= 1.0, using 1.0")
				self.max_chroma = 1.0

			self.sort = str(self.sort).lower()
			if self.sort not in self.VALID_SORTS:
				print("invalid sort ", self.sort, ". Defaulting to hue")
				self.sort = "hue"

			#file validity check
			preset_files = [
				[self.palette_output, os.W_OK],
			]
			self.valid = OkTools.validateFileList(preset_files)


	### Generate ###

	@staticmethod
	def generate(preset: "PoissonPalette.Preset"):
		"""float32[] generate(Preset preset) -> packed OkLab colors"""
		rand = ArrayRandom(preset.seed)
		if preset.logging:
			print("Using seed ", rand._seed)

		radius = preset.wheel_radius
		size = 2 * radius + 1
		stamp = PoissonDisk.sampleCircle(
			center = (radius, radius),
			radius = radius,
			min_dist = preset.min_dist,
			max_x = size,
			max_y = size,
			points_per_try = preset.points_per_try,
			rand = rand,
			logging = preset.logging
		)
		cells = PoissonDisk.stampPoints(stamp)

		#lattice cell -> a,b on the wheel
		ab = (cells - radius) / radius * preset.max_chroma
		lab = np.zeros((len(cells), 3))
		lab[:,0] = preset.lightness
		lab[:,1:3] = ab

		packed = OkPacked.fromOklab(lab[:,0], lab[:,1], lab[:,2], 1.0)
		in_gamut = OkPacked.inGamut(packed)
		if preset.limit_gamut:
			packed = OkPacked.limitToGamut(packed)
		else:
			packed = packed[in_gamut]

		#sort by the stored colors
		packed_lab = OkPacked.toOklab(packed).reshape(-1, 3)
		if preset.sort == "hue":
			order = np.argsort(OkTools.calcHue(packed_lab), kind='stable')
			packed = packed[order]
		elif preset.sort == "chroma":
			order = np.argsort(OkTools.calcChroma(packed_lab), kind='stable')
			packed = packed[order]

		if preset.logging:
			print("Sampled " + str(len(cells)) + " points, " + str(int(np.sum(~in_gamut))) + " out of gamut")
			PoissonStats.printGaps(PoissonStats.gaps(cells), "Wheel")

		return packed


	### Save to file ###

	@staticmethod
	def saveImage(packed, path: str, reserve_transparent: int = 0):
		"""Image saveImage(float32[] packed, str path, int reserve_transparent) 1 pixel high RGBA strip"""
		rgba = np.atleast_1d(OkPacked.toRGBA8888(packed)).astype(np.uint32)
		channels = np.stack([rgba >> 24, rgba >> 16 & 0xFF, rgba >> 8 & 0xFF, rgba & 0xFF], axis=1)
		channels = channels.astype(np.uint8)

		if reserve_transparent:
			channels = np.insert(channels, 0, np.array([0, 0, 0, 0], dtype=np.uint8), axis=0)
		if len(channels) == 0:
			print("Warning: no colors to save")
			return None

		img = Image.fromarray(channels[None, :, :])
		img.save(path)
		return img

	@staticmethod
	def hexList(packed):
		"""list[str] of #rrggbb"""
		srgb = OkLab.oklabToSrgb(np.atleast_2d(OkPacked.toOklab(packed)))
		return [OkTools.srgbToHex(rgb) for rgb in srgb]

	@staticmethod
	def usePreset(preset: "PoissonPalette.Preset"):
		if not preset.valid:
			print("Invalid preset")
			return None

		packed = PoissonPalette.generate(preset)
		PoissonPalette.saveImage(packed, preset.palette_output, preset.reserve_transparent)

		if preset.logging:
			print(" ".join(PoissonPalette.hexList(packed)))
		print("Generated "+str(len(packed) + preset.reserve_transparent)+" colors to "+ preset.palette_output)
		return packed


	### Command line ###

	@staticmethod
	def _strToBool(s):
		return True if str(s).lower() in ["true", "1"] else False

	@staticmethod
	def parser(argv):
		parser = argparse.ArgumentParser(prog=argv[0],description="Poisson disk sampled OkLab chroma wheel palette")
		parser.add_argument(
			'-o', '--output', type=str,
			default="palette.png",
			help="Output palette image"
		)
		parser.add_argument(
			'-l', '--lightness', type=str,
			default="0.65",
			help="OkLab lightness of every color, 0.0 to 1.0"
		)
		parser.add_argument(
			'-r', '--wheel-radius', type=str,
			default="64",
			help="Wheel radius in lattice cells"
		)
		parser.add_argument(
			'-d', '--min-dist', type=str,
			default="8.0",
			help="Minimum distance between colors in lattice cells"
		)
		parser.add_argument(
			'-k', '--points-per-try', type=str,
			default="30",
			help="Candidates per active point before it is retired"
		)
		parser.add_argument(
			'-c', '--max-chroma', type=str,
			default="0.32",
			help="OkLab chroma at the wheel edge"
		)
		parser.add_argument(
			'-g', '--limit-gamut', type=str,
			default="False",
			help="Pull out of gamut colors toward gray instead of dropping them"
		)
		parser.add_argument(
			'-s', '--sort', type=str,
			default="hue",
			help="Options: hue, chroma, stamp"
		)
		parser.add_argument(
			'-t', '--reserve-transparent', type=str,
			default="0",
			help="Insert a transparent color first"
		)
		parser.add_argument(
			'-S', '--seed', type=str,
			default="None",
			help="Random seed, None for time based"
		)
		parser.add_argument(
			'-v', '--verbose', type=str,
			default="False",
			dest='logging',
			help="Print stats"
		)

		arg_list = parser.parse_args(argv[1:])

		seed = None
		if str(arg_list.seed).lower() not in ["none", ""]:
			seed = int(arg_list.seed)

		d_preset = PoissonPalette.Preset(
			palette_output			= str(arg_list.output),
			lightness				= float(arg_list.lightness),
			wheel_radius			= int(arg_list.wheel_radius),
			min_dist					= float(arg_list.min_dist),
			points_per_try			= int(arg_list.points_per_try),
			max_chroma				= float(arg_list.max_chroma),
			limit_gamut				= PoissonPalette._strToBool(arg_list.limit_gamut),
			sort						= str(arg_list.sort),
			reserve_transparent	= int(arg_list.reserve_transparent),
			seed						= seed,
			logging					= PoissonPalette._strToBool(arg_list.logging),
		)

		return d_preset if d_preset.valid else None
