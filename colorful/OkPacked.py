"""
	OkLab colors packed in one float32 bit pattern
	bits 0-7 L, 8-15 A, 16-23 B, 24-31 alpha (lowest alpha bit always 0, so never NaN)
	A and B channels are 0 to 1 with byte 128 as gray, signed a = (byte - 128) / 127
"""
import numpy as np

from .OkLab import OkLab
from .OkTools import OkTools

class OkPacked:
	ALPHA_MASK = 0xFE000000
	GRAY_BYTE = 128 #A and B byte of zero chroma
	GRAY_L = 0.63 #limitToGamut() pulls toward this lightness

	### bit helpers ###

	@staticmethod
	def _toBits(packed):
		return np.asarray(packed, dtype=np.float32).view(np.uint32).astype(np.int64)

	@staticmethod
	def _fromBits(bits):
		out = np.asarray(bits, dtype=np.int64).astype(np.uint32).view(np.float32)
		return out[()] if out.ndim == 0 else out

	@staticmethod
	def _scalar(arr):
		return arr[()] if np.ndim(arr) == 0 else arr

	@staticmethod
	def _byte(channel):
		"""0 to 1 channel -> nearest byte, out of range values are clipped"""
		return np.clip(np.round(np.asarray(channel, dtype=float) * 255.0), 0, 255).astype(np.int64)

	@staticmethod
	def _signedByte(value):
		"""signed a or b -> byte, 0.0 is exactly GRAY_BYTE"""
		byte = np.round(np.asarray(value, dtype=float) * 127.0 + OkPacked.GRAY_BYTE)
		return np.clip(byte, 0, 255).astype(np.int64)

	@staticmethod
	def _pack(l_byte, a_byte, b_byte, alpha_byte):
		bits = (
			(alpha_byte << 24 & OkPacked.ALPHA_MASK)
			| (b_byte << 16 & 0xFF0000)
			| (a_byte << 8 & 0xFF00)
			| (l_byte & 0xFF)
		)
		return OkPacked._fromBits(bits)

	@staticmethod
	def _alphaByte(bits):
		return (bits & OkPacked.ALPHA_MASK) >> 24

	@staticmethod
	def _decodeSigned(bits):
		"""(L, a, b) with a, b in about [-1,1]"""
		L = (bits & 0xFF) / 255.0
		A = ((bits >> 8 & 0xFF) - OkPacked.GRAY_BYTE) / 127.0
		B = ((bits >> 16 & 0xFF) - OkPacked.GRAY_BYTE) / 127.0
		return L, A, B


	### pack / unpack ###

	@staticmethod
	def oklab(l, a, b, alpha=1.0):
		"""float32 oklab(float l, float a, float b, float alpha) all channels 0 to 1, clipped"""
		return OkPacked._pack(
			OkPacked._byte(l),
			OkPacked._byte(a),
			OkPacked._byte(b),
			OkPacked._byte(alpha)
		)

	@staticmethod
	def fromOklab(L, a, b, alpha=1.0):
		"""float32 fromOklab(float L, float a, float b, float alpha) with signed a, b"""
		return OkPacked._pack(
			OkPacked._byte(L),
			OkPacked._signedByte(a),
			OkPacked._signedByte(b),
			OkPacked._byte(alpha)
		)

	@staticmethod
	def channelL(packed):
		return OkPacked._scalar((OkPacked._toBits(packed) & 0xFF) / 255.0)

	@staticmethod
	def channelA(packed):
		return OkPacked._scalar((OkPacked._toBits(packed) >> 8 & 0xFF) / 255.0)

	@staticmethod
	def channelB(packed):
		return OkPacked._scalar((OkPacked._toBits(packed) >> 16 & 0xFF) / 255.0)

	@staticmethod
	def alpha(packed):
		#0xFE maps to 1.0
		return OkPacked._scalar(OkPacked._alphaByte(OkPacked._toBits(packed)) / 254.0)

	@staticmethod
	def toOklab(packed):
		"""float[...,3] toOklab(float32 packed) -> L, a, b with signed a, b"""
		L, A, B = OkPacked._decodeSigned(OkPacked._toBits(packed))
		return np.stack(np.broadcast_arrays(L, A, B), axis=-1)

	@staticmethod
	def chroma(packed):
		_, A, B = OkPacked._decodeSigned(OkPacked._toBits(packed))
		return OkPacked._scalar(np.sqrt(A * A + B * B))


	### RGBA8888 ###

	@staticmethod
	def fromRGBA8888(rgba):
		"""float32 fromRGBA8888(uint32 rgba) red in the most significant byte"""
		rgba = np.asarray(rgba, dtype=np.int64)
		srgb = np.stack([rgba >> 24 & 0xFF, rgba >> 16 & 0xFF, rgba >> 8 & 0xFF], axis=-1) / 255.0
		lab = OkLab.srgbToOklab(srgb)
		return OkPacked._pack(
			OkPacked._byte(lab[...,0]),
			OkPacked._signedByte(lab[...,1]),
			OkPacked._signedByte(lab[...,2]),
			rgba & 0xFF
		)

	@staticmethod
	def toRGBA8888(packed):
		"""uint32 toRGBA8888(float32 packed)"""
		bits = OkPacked._toBits(packed)
		srgb = np.clip(OkLab.oklabToSrgb(OkPacked.toOklab(packed)), 0.0, 1.0)
		rgb = OkPacked._byte(srgb)

		alpha_byte = OkPacked._alphaByte(bits)
		alpha_byte |= alpha_byte >> 7 #0xFE -> 0xFF
		rgba = rgb[...,0] << 24 | rgb[...,1] << 16 | rgb[...,2] << 8 | alpha_byte
		rgba = rgba.astype(np.uint32)
		return int(rgba) if rgba.ndim == 0 else rgba


	### Gamut ###

	@staticmethod
	def inGamut(packed):
		return OkPacked._scalar(OkTools.inOklabGamut(OkPacked.toOklab(packed)))

	@staticmethod
	def limitToGamut(packed, steps: int = 32):
		"""Move out of gamut colors toward gray until the packed result fits, alpha is kept"""
		packed = np.asarray(packed, dtype=np.float32)
		bits = OkPacked._toBits(packed)
		L, A, B = np.broadcast_arrays(*OkPacked._decodeSigned(bits))
		alpha = OkPacked._alphaByte(bits) / 254.0

		limited = packed.copy()
		done = OkPacked.inGamut(packed)
		for attempt in range(steps-1, -1, -1):
			if np.all(done):
				break
			progress = attempt / steps
			#test the packed candidate, the 8 bit rounding can leave the gamut again
			candidate = OkPacked.fromOklab(
				OkPacked.GRAY_L + (L - OkPacked.GRAY_L) * progress,
				A * progress,
				B * progress,
				alpha
			)
			fits = OkPacked.inGamut(candidate)
			limited = np.where(~done & fits, candidate, limited)
			done = done | fits

		return OkPacked._scalar(limited)

	@staticmethod
	def randomColor(rand):
		"""Uniform in gamut opaque color, rand needs random() -> [0,1)"""
		while True:
			L, A, B = rand.random(), rand.random(), rand.random()
			packed = OkPacked.oklab(L, A, B, 1.0)
			if OkPacked.inGamut(packed):
				return packed


	### Editing ###
	#change is 0 to 1, 0 keeps the color and 1 moves the channel all the way

	@staticmethod
	def _editByte(packed, shift, change, toward, keep=0xFF):
		bits = OkPacked._toBits(packed)
		old = bits >> shift & 0xFF
		new = np.trunc(old + (toward - old) * np.asarray(change, dtype=float)).astype(np.int64)
		new = np.clip(new, 0, 255) & keep
		return OkPacked._fromBits((bits & ~(0xFF << shift)) | new << shift)

	@staticmethod
	def lighten(packed, change):
		return OkPacked._editByte(packed, 0, change, 255)

	@staticmethod
	def darken(packed, change):
		return OkPacked._editByte(packed, 0, change, 0)

	@staticmethod
	def raiseA(packed, change):
		"""Toward magenta"""
		return OkPacked._editByte(packed, 8, change, 255)

	@staticmethod
	def lowerA(packed, change):
		"""Toward green"""
		return OkPacked._editByte(packed, 8, change, 0)

	@staticmethod
	def raiseB(packed, change):
		"""Toward yellow"""
		return OkPacked._editByte(packed, 16, change, 255)

	@staticmethod
	def lowerB(packed, change):
		"""Toward blue"""
		return OkPacked._editByte(packed, 16, change, 0)

	@staticmethod
	def blot(packed, change):
		"""More opaque"""
		return OkPacked._editByte(packed, 24, change, 254, 0xFE)

	@staticmethod
	def fade(packed, change):
		"""More transparent"""
		return OkPacked._editByte(packed, 24, change, 0, 0xFE)

	@staticmethod
	def dullen(packed, change):
		"""Scale chroma by 1 - change, lightness and alpha kept"""
		bits = OkPacked._toBits(packed)
		_, A, B = OkPacked._decodeSigned(bits)
		keep = 1.0 - np.asarray(change, dtype=float)
		return OkPacked._pack(bits & 0xFF, OkPacked._signedByte(A * keep), OkPacked._signedByte(B * keep), OkPacked._alphaByte(bits))

	@staticmethod
	def enrich(packed, change):
		"""Scale chroma by 1 + change, then limitToGamut()"""
		bits = OkPacked._toBits(packed)
		_, A, B = OkPacked._decodeSigned(bits)
		grow = 1.0 + np.asarray(change, dtype=float)
		richer = OkPacked._pack(bits & 0xFF, OkPacked._signedByte(A * grow), OkPacked._signedByte(B * grow), OkPacked._alphaByte(bits))
		return OkPacked.limitToGamut(richer)

	@staticmethod
	def hue(packed):
		"""OkLab hue in turns [0,1), 0 = +a axis"""
		lab = np.reshape(OkPacked.toOklab(packed), (-1, 3))
		return OkPacked._scalar(np.reshape(OkTools.calcHue(lab), np.shape(packed)))

	@staticmethod
	def saturation(packed):
		"""Chroma relative to the most chroma sRGB has at the same L and hue, 0 to 1"""
		lab = np.reshape(OkPacked.toOklab(packed), (-1, 3))
		max_chroma = OkTools.calcMaxChroma(lab[:,0], OkTools.calcHue(lab))
		chroma = OkTools.calcChroma(lab)
		sat = np.where(max_chroma > 0, np.minimum(chroma / np.maximum(max_chroma, 1e-12), 1.0), 0.0)
		return OkPacked._scalar(np.reshape(sat, np.shape(packed)))

	@staticmethod
	def toEditedFloat(basis, hue, saturation, value, opacity):
		"""
			float32 toEditedFloat(float32 basis, float hue, float saturation, float value, float opacity)
			Adds hue (turns, wrapping), saturation, value (lightness) and opacity to basis, then fits the result into gamut
		"""
		basis = np.asarray(basis, dtype=np.float32)
		bits = OkPacked._toBits(basis)
		L = np.clip((bits & 0xFF) / 255.0 + value, 0.0, 1.0)
		alpha = np.clip(OkPacked._alphaByte(bits) / 254.0 + opacity, 0.0, 1.0)

		new_hue = (OkPacked.hue(basis) + hue) % 1.0
		new_sat = np.clip(OkPacked.saturation(basis) + saturation, 0.0, 1.0)
		L, new_hue, new_sat = np.broadcast_arrays(L, new_hue, new_sat)
		chroma = new_sat * np.reshape(OkTools.calcMaxChroma(L.ravel(), new_hue.ravel()), np.shape(L))

		angle = new_hue * 2 * np.pi
		edited = OkPacked.fromOklab(L, chroma * np.cos(angle), chroma * np.sin(angle), alpha)
		return OkPacked.limitToGamut(edited)


	### Gradients ###

	@staticmethod
	def lerpColors(start, end, change):
		"""Per byte lerp of L, A, B and alpha from start toward end"""
		s_bits, e_bits = OkPacked._toBits(start), OkPacked._toBits(end)
		change = np.asarray(change, dtype=float)
		out = 0
		for shift in (0, 8, 16, 24):
			s, e = s_bits >> shift & 0xFF, e_bits >> shift & 0xFF
			out = out | np.trunc(s + change * (e - s)).astype(np.int64) << shift
		return OkPacked._fromBits(out & 0xFEFFFFFF)

	@staticmethod
	def makeGradient(start, end, steps: int, interpolation=None):
		"""
			float32[steps] makeGradient(float32 start, float32 end, int steps, interpolation)
			start, then in gamut lerps, then end. interpolation maps [0,1) to [0,1], linear when None
		"""
		steps = int(steps)
		if steps <= 0:
			return np.zeros(0, dtype=np.float32)
		if steps == 1:
			return np.array([start], dtype=np.float32)

		change = np.arange(steps - 1) / (steps - 1)
		if interpolation is not None:
			change = np.asarray(interpolation(change), dtype=float)
		inner = OkPacked.limitToGamut(OkPacked.lerpColors(start, end, change))
		return np.append(np.atleast_1d(inner), np.float32(end)).astype(np.float32)

	@staticmethod
	def appendGradient(appending, start, end, steps: int, interpolation=None):
		"""makeGradient() appended to appending, None stays None"""
		if appending is None:
			return None
		gradient = OkPacked.makeGradient(start, end, steps, interpolation)
		return np.concatenate([np.asarray(appending, dtype=np.float32), gradient])
