"""
Timing of a reused projection against one built for every query, and of the
batch form against the exact geodesic.
"""

import timeit

import numpy as np

from plane_projection import PlaneProjection
from plane_projection.geo import geodesic_distance

A = (55.60, 13.5)
B = (55.61, 13.53)
RUNS = 100_000


def report(name, seconds, runs=RUNS):
    print(f"{name:<32} {seconds / runs * 1e9:10.1f} ns/op")


def main():
    projection = PlaneProjection(55.65)
    report("reused_plane_projection", timeit.timeit(lambda: projection.distance(A, B), number=RUNS))
    report(
        "single_shot_plane_projection",
        timeit.timeit(lambda: PlaneProjection(55.65).distance(A, B), number=RUNS),
    )
    report("wgs84_geodesic", timeit.timeit(lambda: geodesic_distance(A, B), number=RUNS // 10), RUNS // 10)

    points = np.column_stack([np.full(10_000, B[0]), np.full(10_000, B[1])])
    seconds = timeit.timeit(lambda: projection.distances(A, points), number=100)
    report("batch_plane_projection", seconds, 100 * len(points))


if __name__ == "__main__":
    main()
