"""Namespace for misc tools used by colorful"""

import os
import numpy as np
from .OkLab import OkLab

#Manipulate arrays of colors
class OkTools:

	### Color Tools ###

	@staticmethod
	def inOklabGamut(lab_list, eps = 1e-12, lower_bound = 0.0, upper_bound = 1.0, axis=-1):
		"""bool[] inOklabGamut(float[][3] lab_list, float eps = 1e-12, float lower_bound = 0.0, float upper_bound = 1.0 ))"""
		lin_list = OkLab.oklabToLinear(lab_list)
		in_gamut = (lin_list >= lower_bound-eps) & (lin_list <= upper_bound+eps)
		in_gamut = in_gamut.all(axis=axis)
		return in_gamut

	@staticmethod
	def calcChroma(lab_list):
		"""float[] calcChroma(float[][3] lab_list))"""
		lab_list = np.atleast_2d(lab_list)
		return np.sqrt( lab_list[:,1]**2 + lab_list[:,2]**2 )

	@staticmethod
	def calcHue(lab_list):
		"""float[] calcHue(float[][3] lab_list)) -> turns [0,1), 0 = +a axis"""
		lab_list = np.atleast_2d(lab_list)
		hue = np.arctan2(lab_list[:,2], lab_list[:,1]) / (2*np.pi)
		return hue % 1.0

	@staticmethod
	def calcMaxChroma(L_list, hue_list, steps = 24):
		"""float[] calcMaxChroma(float[] L_list, float[] hue_list) largest in gamut chroma, hue in turns"""
		L_list, hue_list = np.broadcast_arrays(np.asarray(L_list, dtype=float), np.asarray(hue_list, dtype=float))
		angle = hue_list * 2*np.pi
		low = np.zeros(L_list.shape)
		high = np.full(L_list.shape, 0.5) #sRGB never reaches this
		for _ in range(steps):
			mid = (low + high) * 0.5
			lab = np.stack([L_list, mid*np.cos(angle), mid*np.sin(angle)], axis=-1)
			fits = OkTools.inOklabGamut(lab)
			low = np.where(fits, mid, low)
			high = np.where(fits, high, mid)
		return low



	### Misc tools ###

	@staticmethod
	def srgbToHex(rgb):
		"""char* srgbToHex(float[3] rgb)"""
		rgb = np.clip(rgb,[0.0]*3,[1.0]*3)
		rgb = np.round(rgb * 255.0)
		rgb = rgb.astype(np.uint8)
		return "#{:02x}{:02x}{:02x}".format(rgb[0],rgb[1],rgb[2])

	@staticmethod
	def validateFileList(file_list: list[[str,str]]):
		preset_success = True
		for file, access_flag in file_list:

			if (file is None) or (file==''):
				print("Undefined file")
				preset_success = False
				continue

			#directory
			base_dir = os.path.dirname(file)
			base_dir = "./" if base_dir=='' else base_dir
			if not os.path.isdir(base_dir):
				print("Directory doesn't exist " + base_dir)
				preset_success = False
				continue
			if not os.access(base_dir, access_flag):
				print("Can't access directory "+base_dir)
				preset_success = False
				continue

			#file
			if (access_flag == os.R_OK):
				if not os.path.exists(file):
					print("File doesn't exist "+file)
					preset_success = False
			elif os.path.exists(file) and not os.access(file, access_flag):
				print("Can't access file "+file)
				preset_success = False
		return preset_success
