import numpy as np

from concave_hull.shapes import convex_hull_indices
from concave_hull.utils.geometry import is_clockwise


def test_square_starts_at_lowest_vertex(square):
    assert convex_hull_indices(square) == [0, 3, 2, 1, 0]


def test_interior_points_are_skipped(random_cloud):
    hull = convex_hull_indices(random_cloud)
    assert hull[0] == hull[-1]
    assert is_clockwise(random_cloud[hull])
    assert len(hull) - 1 < len(random_cloud)


def test_lowest_tie_broken_by_x():
    points = np.array([[3.0, 0.0], [1.0, 0.0], [2.0, 2.0]])
    assert convex_hull_indices(points)[0] == 1
