#PoissonStats.py
import numpy as np
from scipy.spatial import cKDTree

from .PoissonDisk import PoissonDisk

class PoissonStats:
	@staticmethod
	def gaps(points):
		"""dict gaps(float[][2] points) nearest neighbour distance of every point"""
		points = np.asarray(points, dtype=float)
		stats = {"count": len(points), "min": None, "max": None, "avg": None, "median": None}
		if len(points) < 2:
			return stats

		point_tree = cKDTree(points)
		dists, _ = point_tree.query(points, k=2)
		nearest = dists[:,1] #[:,0] is the point itself

		stats["min"] = float(np.min(nearest))
		stats["max"] = float(np.max(nearest))
		stats["avg"] = float(np.average(nearest))
		stats["median"] = float(np.median(nearest))
		return stats

	@staticmethod
	def stampGaps(stamp):
		"""gaps() of the picked stamp cells"""
		return PoissonStats.gaps(PoissonDisk.stampPoints(stamp))

	@staticmethod
	def printGaps(stats, list_name = "", precision = 4):
		print(list_name+" Points: " + str(stats["count"]))
		if stats["count"] < 2:
			print("")
			return

		avg_gap = stats["avg"]
		print(list_name+" Smallest gap: "	+str(round( stats["min"], precision )) )
		print(list_name+" Biggest gap: "		+str(round( stats["max"], precision )) )
		print(list_name+" Avg gap: "			+str(round( avg_gap, precision )) )
		print(list_name+" Median gap: "		+str(round( stats["median"], precision )) )

		#Relative gap delta
		gap_delta = abs(1.0 - stats["min"]/avg_gap)
		print(list_name+" smallest gap delta to avg "+str(round(100*gap_delta,precision))+" %")
		gap_delta = abs(1.0 - stats["max"]/avg_gap)
		print(list_name+" biggest gap delta to avg  "+str(round(100*gap_delta,precision))+" %")
		print("")
