import numpy as np
import time

#https://rosettacode.org/wiki/Pseudo-random_numbers/Splitmix64
class ArrayRandom:
	"""
		Splitmix64 vectorized pseudo number generator
		If no seed is given, a random is generated

		integers(high) and random() follow numpy.random.Generator so either can
		be passed as the uniform source of PoissonDisk
	"""
	_state = None
	_seed = None #ArrayRandom._seed can be passed to new instance to reproduce the results
	MASK = 2**64-1

	FLOAT_MASK = np.uint64(1023) << np.uint64(52)
	CONST_ADD1 = np.uint64(0x9e3779b97f4a7c15)
	CONST_MUL1 = np.uint64(0xbf58476d1ce4e5b9)
	CONST_MUL2 = np.uint64(0x94d049bb133111eb)

	#Python int or np.uint64
	def __init__(self, user_seed = None):
		buf_seed = user_seed
		if buf_seed is None:
			#effective starting seed is the output of 1 iteration pass, using _state = time + CONST_ADD1
			self._state = np.uint64(time.perf_counter_ns() & self.MASK)
			buf_seed = int(self.randomInt((1,))[0])
		elif not isinstance(buf_seed, (int,np.integer)) or isinstance(buf_seed, bool):
			raise ValueError("user_seed must be int or np.uint64")
		self._state = np.uint64(int(buf_seed) & self.MASK)
		self._seed = self._state

	def randomInt(self, shape: tuple):
		"""uint64[shape] randomInt(tuple shape)"""
		count = np.prod(shape, dtype=int)

		#uint64 arithmetic wraps silently, errstate only hides the scalar overflow warnings
		with np.errstate(over='ignore'):
			rand_arr = np.arange(1, count+1, dtype=np.uint64) #n=1,2,3...
			rand_arr*=self.CONST_ADD1 #i*n
			rand_arr+=self._state #i*n+s

			#Splitmix64
			rand_arr^= rand_arr >> np.uint64(30)
			rand_arr*= self.CONST_MUL1
			rand_arr^= rand_arr >> np.uint64(27)
			rand_arr*= self.CONST_MUL2
			rand_arr^= rand_arr >> np.uint64(31)

			self._state = np.add(self._state, np.multiply(self.CONST_ADD1, np.uint64(count)) )
		return rand_arr.reshape(shape)

	def random(self, shape: tuple = None):
		"""float[shape] random(tuple shape = None) -> normalized [0,1), a python float when shape is None"""
		if shape is None:
			return float(self.random((1,))[0])
		return (self.randomInt(shape) >> np.uint64(12) | self.FLOAT_MASK).view(np.float64) - 1.0

	def integers(self, high: int, shape: tuple = None):
		"""int[shape] integers(int high, tuple shape = None) -> [0,high), a python int when shape is None"""
		high = int(high)
		if high < 1:
			raise ValueError("high must be >= 1")
		if shape is None:
			return int(self.integers(high, (1,))[0])
		#upper 32 bits scaled to range, bias is below 2**-32 for any sane high
		upper = (self.randomInt(shape) >> np.uint64(32)).astype(np.float64)
		return (upper * high / 2.0**32).astype(np.int64)

