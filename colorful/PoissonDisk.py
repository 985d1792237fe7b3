#PoissonDisk.py
import math
import numpy as np
from dataclasses import dataclass
from numba import njit

from .ArrayRandom import ArrayRandom


#scan the 5x5 cell block around (gx,gy), False if any stored point is closer than min_dist
@njit(fastmath=False)
def PoissonDisk_njitIsFar(grid_x:np.ndarray, grid_y:np.ndarray, x:float, y:float, gx:int, gy:int, min_dist_sq:float):
	grid_w = grid_x.shape[0]
	grid_h = grid_x.shape[1]
	i0 = max(gx - 2, 0)
	j0 = max(gy - 2, 0)
	i1 = min(gx + 3, grid_w)
	j1 = min(gy + 3, grid_h)
	for i in range(i0, i1):
		for j in range(j0, j1):
			px = grid_x[i, j]
			if np.isnan(px): #empty cell
				continue
			dx = px - x
			dy = grid_y[i, j] - y
			if dx*dx + dy*dy < min_dist_sq:
				return False
	return True


@dataclass
class PoissonResult:
	stamp: np.ndarray #int32[max_x][max_y], 0 = empty, n = n-th accepted point
	points: np.ndarray #float[n][2] in acceptance order


class PoissonDisk:
	"""
		Blue noise points by dart throwing around accepted points.
		A uniform grid with cells of min_dist/sqrt(2) holds at most one point per cell,
		so a candidate only has to be tested against the 5x5 cells around it.

		rand is anything with integers(high) and random(), numpy.random.Generator or ArrayRandom
	"""
	MIN_DISTANCE = 1.0001 #smaller min_dist is floored to this
	DEFAULT_POINTS_PER_TRY = 10


	@staticmethod
	def _checkLattice(max_x, max_y):
		if max_x <= 0 or max_y <= 0:
			raise ValueError("max_x and max_y must be positive, got " + str((max_x, max_y)))


	### Shared sampler ###
	@staticmethod
	def sample(
		min_pos,
		max_pos,
		min_dist: float,
		max_x: int,
		max_y: int,
		points_per_try: int = DEFAULT_POINTS_PER_TRY,
		rand = None,
		circle_center = None,
		circle_radius: float = 0.0,
		logging = False
	):
		"""
			Sample the rectangle min_pos..max_pos (inclusive integer corners) clipped to [0,max_x) x [0,max_y).
			With circle_center set, candidates also have to be within circle_radius of it.
			Returns PoissonResult with the stamp and the accepted float points.
		"""
		max_x, max_y = int(max_x), int(max_y)
		PoissonDisk._checkLattice(max_x, max_y)

		min_x, min_y = int(min_pos[0]), int(min_pos[1])
		hi_x, hi_y = int(max_pos[0]), int(max_pos[1])
		if min_x >= hi_x or min_y >= hi_y:
			raise ValueError("min_pos must be below max_pos on both axes, got " + str((min_pos, max_pos)))

		points_per_try = int(points_per_try)
		if points_per_try < 1:
			raise ValueError("points_per_try must be >= 1")

		#clip region to lattice
		min_x, min_y = max(min_x, 0), max(min_y, 0)
		hi_x, hi_y = min(hi_x, max_x - 1), min(hi_y, max_y - 1)
		if min_x > hi_x or min_y > hi_y:
			raise ValueError("region is outside of [0,max_x) x [0,max_y)")

		if not min_dist > PoissonDisk.MIN_DISTANCE:
			min_dist = PoissonDisk.MIN_DISTANCE
		min_dist = float(min_dist)
		min_dist_sq = min_dist * min_dist

		if rand is None:
			rand = ArrayRandom()

		width = hi_x - min_x + 1
		height = hi_y - min_y + 1
		end_x = hi_x + 1.0 #candidates are inside while < end
		end_y = hi_y + 1.0

		inv_cell = 1.0 / (min_dist * math.sqrt(0.5))
		grid_w = max(1, math.ceil(width * inv_cell))
		grid_h = max(1, math.ceil(height * inv_cell))
		grid_x = np.full((grid_w, grid_h), np.nan)
		grid_y = np.full((grid_w, grid_h), np.nan)

		stamp = np.zeros((max_x, max_y), dtype=np.int32)

		use_circle = circle_center is not None
		if use_circle:
			circle_x, circle_y = float(circle_center[0]), float(circle_center[1])
			circle_r_sq = float(circle_radius) * float(circle_radius)
			if not (min_x <= circle_x < end_x and min_y <= circle_y < end_y):
				raise ValueError("circle_center is outside of the sampled region")
			seed_x, seed_y = circle_x, circle_y
		else:
			seed_x, seed_y = min_x + width * 0.5, min_y + height * 0.5

		active = []
		accepted = []

		def place(x, y):
			gx = min(int((x - min_x) * inv_cell), grid_w - 1)
			gy = min(int((y - min_y) * inv_cell), grid_h - 1)
			grid_x[gx, gy] = x
			grid_y[gx, gy] = y
			active.append((x, y))
			accepted.append((x, y))
			stamp[int(x), int(y)] = len(accepted)

		place(seed_x, seed_y)

		turn_step = 1.0 / points_per_try
		iterations = 0
		while active:
			iterations += 1
			i = int(rand.integers(len(active)))
			px, py = active[i]
			turn = float(rand.random())

			#points_per_try candidates evenly spaced around px,py with one random rotation
			for _ in range(points_per_try):
				angle = math.radians(360.0 * turn)
				x = px + min_dist * math.cos(angle)
				y = py + min_dist * math.sin(angle)
				turn += turn_step

				if not (min_x <= x < end_x and min_y <= y < end_y):
					continue
				if use_circle:
					dx, dy = x - circle_x, y - circle_y
					if dx*dx + dy*dy > circle_r_sq:
						continue
				gx = min(int((x - min_x) * inv_cell), grid_w - 1)
				gy = min(int((y - min_y) * inv_cell), grid_h - 1)
				if PoissonDisk_njitIsFar(grid_x, grid_y, x, y, gx, gy, min_dist_sq):
					place(x, y)
					break
			else:
				#every candidate failed, point is done spawning
				active.pop(i)

		points = np.array(accepted, dtype=float).reshape(-1, 2)

		if logging:
			print("PoissonDisk sample() finished after " + str(iterations) + " iterations. " +
				str(len(points)) + " points.")
		return PoissonResult(stamp, points)


	### Entry points ###
	@staticmethod
	def sampleCircle(
		center,
		radius: float,
		min_dist: float,
		max_x: int,
		max_y: int,
		points_per_try: int = DEFAULT_POINTS_PER_TRY,
		rand = None,
		logging = False
	):
		"""
			int[max_x][max_y] sampleCircle(int[2] center, float radius, float min_dist, int max_x, int max_y, int points_per_try, rand)
			Points within radius of center (euclidean) and min_dist apart. Non-zero stamp cells are picked points.
			Radius and min_dist hold exactly for PoissonResult.points from sample(). Stamp cells are
			truncated points, so they can sit up to sqrt(2) outside the radius or closer than min_dist.
			points_per_try: around 5 for small radii, 30 for large ones
		"""
		PoissonDisk._checkLattice(int(max_x), int(max_y))
		if not radius > 0:
			raise ValueError("radius must be positive, got " + str(radius))

		rr = int(math.floor(radius + 0.5))
		if rr < 1:
			raise ValueError("radius rounds to an empty square, got " + str(radius))

		cx, cy = int(center[0]), int(center[1])
		if not (0 <= cx < max_x and 0 <= cy < max_y):
			raise ValueError("center is outside of [0,max_x) x [0,max_y), got " + str((cx, cy)))

		result = PoissonDisk.sample(
			min_pos = (cx - rr, cy - rr),
			max_pos = (cx + rr, cy + rr),
			min_dist = min_dist,
			max_x = max_x,
			max_y = max_y,
			points_per_try = points_per_try,
			rand = rand,
			circle_center = (cx, cy),
			circle_radius = radius,
			logging = logging
		)
		return result.stamp

	@staticmethod
	def sampleRectangle(
		min_pos,
		max_pos,
		min_dist: float,
		max_x: int,
		max_y: int,
		points_per_try: int = DEFAULT_POINTS_PER_TRY,
		rand = None,
		logging = False
	):
		"""
			int[max_x][max_y] sampleRectangle(int[2] min_pos, int[2] max_pos, float min_dist, int max_x, int max_y, int points_per_try, rand)
			Points inside min_pos..max_pos (both inclusive) and min_dist apart. Non-zero stamp cells are picked points.
			min_dist holds exactly for PoissonResult.points from sample(), truncated stamp cells can be up to sqrt(2) closer.
			points_per_try: around 5 for small areas, 30 for large ones
		"""
		result = PoissonDisk.sample(
			min_pos = min_pos,
			max_pos = max_pos,
			min_dist = min_dist,
			max_x = max_x,
			max_y = max_y,
			points_per_try = points_per_try,
			rand = rand,
			logging = logging
		)
		return result.stamp


	#non-zero cells of stamp as int[n][2] (x,y), in stamp order
	@staticmethod
	def stampPoints(stamp: np.ndarray):
		idxs = np.argwhere(stamp > 0)
		order = np.argsort(stamp[idxs[:,0], idxs[:,1]], kind='stable')
		return idxs[order]
