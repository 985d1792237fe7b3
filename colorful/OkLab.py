"""sRGB, linear and OkLab conversions of float[...,3] arrays"""
import numpy as np

class OkLab:
	#https://bottosson.github.io/posts/oklab/
	LINEAR_TO_LMS = np.array([
		[0.4122214708, 0.5363325363, 0.0514459929],
		[0.2119034982, 0.6806995451, 0.1073969566],
		[0.0883024619, 0.2817188376, 0.6299787005],
	])
	LMS_TO_OKLAB = np.array([
		[0.2104542553,  0.7936177850, -0.0040720468],
		[1.9779984951, -2.4285922050,  0.4505937099],
		[0.0259040371,  0.7827717662, -0.8086757660],
	])
	OKLAB_TO_LMS = np.array([
		[1.0,  0.3963377774,  0.2158037573],
		[1.0, -0.1055613458, -0.0638541728],
		[1.0, -0.0894841775, -1.2914855480],
	])
	LMS_TO_LINEAR = np.array([
		[ 4.0767416621, -3.3077115913,  0.2309699292],
		[-1.2684380046,  2.6097574011, -0.3413193965],
		[-0.0041960863, -0.7034186147,  1.7076147010],
	])

	@staticmethod
	def srgbToLinear(srgb: np.ndarray):
		srgb = np.asarray(srgb, dtype=float)
		cutoff = srgb <= 0.04045
		higher = ((np.maximum(srgb, 0.04045) + 0.055) / 1.055) ** 2.4
		lower = srgb / 12.92
		return np.where(cutoff, lower, higher)

	@staticmethod
	def linearToSrgb(lin: np.ndarray):
		lin = np.maximum(np.asarray(lin, dtype=float), 0.0)
		cutoff = lin <= 0.0031308
		higher = 1.055 * np.power(lin, 1/2.4) - 0.055
		lower = lin * 12.92
		return np.where(cutoff, lower, higher)

	@staticmethod
	def linearToOklab(lin: np.ndarray):
		lms = np.asarray(lin, dtype=float) @ OkLab.LINEAR_TO_LMS.T
		lms_ = np.cbrt(lms)
		return lms_ @ OkLab.LMS_TO_OKLAB.T

	@staticmethod
	def oklabToLinear(lab: np.ndarray):
		lms_ = np.asarray(lab, dtype=float) @ OkLab.OKLAB_TO_LMS.T
		lms = lms_**3
		return lms @ OkLab.LMS_TO_LINEAR.T

	@staticmethod
	def srgbToOklab(col: np.ndarray):
		return OkLab.linearToOklab(OkLab.srgbToLinear(col))

	@staticmethod
	def oklabToSrgb(col: np.ndarray):
		return OkLab.linearToSrgb(OkLab.oklabToLinear(col))
