#CC0 colorful-poisson 2025
"""
	Generate a palette of blue noise distributed colors on an OkLab chroma wheel
"""

import sys
from colorful.PoissonPalette import PoissonPalette

if __name__ == '__main__':
	argv = sys.argv[:]

	im_too_lazy_to_use_terminal = True
	if im_too_lazy_to_use_terminal and len(argv)<=1:
		lazy_arguments = [
			"--output",				"./palette.png",
			"--lightness",			"0.7",	#OkLab L of every color
			"--wheel-radius",		"64",		#lattice cells
			"--min-dist",			"10.0",	#lattice cells between colors
			"--points-per-try",	"30",
			"--max-chroma",		"0.3",
			"--sort",				"hue",
			"--seed",				"0",
			"--verbose",			"1",
		]
		for arg in lazy_arguments:
			argv.append(arg)

	d_preset = PoissonPalette.parser(argv)
	if d_preset:
		PoissonPalette.usePreset(d_preset)
