import math

import numpy as np
import pytest
from scipy.spatial import ConvexHull
from shapely.geometry import MultiPoint

from concave_hull import (DegenerateInputError, InsufficientPointsError,
                          compute_concave_hull, concave_hull_indices,
                          convex_hull_indices)
from concave_hull.core.contain import contains_all
from concave_hull.core.intersect import is_simple
from concave_hull.utils import to_polygon
from concave_hull.utils.geometry import is_clockwise, polygon_area


def assert_valid_hull(points, vertices):
    """Closed, simple, clockwise and enclosing every point."""
    assert np.array_equal(vertices[0], vertices[-1])
    assert len(vertices) >= 4
    polygon = to_polygon(vertices)
    assert polygon.is_valid
    assert polygon.buffer(1e-9).covers(MultiPoint(points))
    assert contains_all(points, vertices, tolerance=1e-9)
    assert is_clockwise(vertices)
    # no synthesized vertices
    originals = set(map(tuple, points))
    assert all(tuple(v) in originals for v in vertices)


def test_unit_square_convex(square):
    vertices = compute_concave_hull(square, math.inf)
    expected = [[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]
    assert vertices.tolist() == expected
    assert polygon_area(vertices) == -1


def test_question_mark(question_mark):
    vertices = compute_concave_hull(question_mark, 50)
    assert_valid_hull(question_mark, vertices)


def test_question_mark_is_hugged(question_mark):
    vertices = compute_concave_hull(question_mark, 3)
    assert_valid_hull(question_mark, vertices)
    convex_area = ConvexHull(question_mark).volume
    assert abs(polygon_area(vertices)) < 0.9 * convex_area


def test_u_shape(u_shape):
    vertices = compute_concave_hull(u_shape, 2)
    assert_valid_hull(u_shape, vertices)
    # the gap between the arms stays open
    assert abs(polygon_area(vertices)) < 0.9 * ConvexHull(u_shape).volume


@pytest.mark.parametrize('points', [
    [(0, 0), (1, 1)],
    [(0, 0), (1, 1), (0, 0), (1, 1), (1, 1)],
    [],
])
def test_insufficient_points(points):
    with pytest.raises(InsufficientPointsError):
        compute_concave_hull(points, 1)


def test_collinear_points():
    points = [(i, 2 * i + 1) for i in range(10)]
    with pytest.raises(DegenerateInputError):
        compute_concave_hull(points, 1)
    with pytest.raises(DegenerateInputError):
        compute_concave_hull(points, math.inf)


def test_non_finite_points():
    with pytest.raises(DegenerateInputError):
        compute_concave_hull([(0, 0), (1, 0), (0, math.nan)], 1)


def test_duplicate_pair(random_cloud):
    with_duplicate = np.vstack([random_cloud[7], random_cloud])
    for concavity in (0, 2, math.inf):
        expected = compute_concave_hull(random_cloud, concavity)
        result = compute_concave_hull(with_duplicate, concavity)
        assert np.array_equal(result, expected)


def test_zero_concavity_terminates(sparse_cloud):
    vertices = compute_concave_hull(sparse_cloud, 0)
    assert_valid_hull(sparse_cloud, vertices)


@pytest.mark.parametrize('concavity', [0, 1, 2, 5, 20])
def test_random_cloud_properties(random_cloud, concavity):
    vertices = compute_concave_hull(random_cloud, concavity)
    assert_valid_hull(random_cloud, vertices)
    hull = concave_hull_indices(random_cloud, concavity)
    assert is_simple(random_cloud, hull)


def test_convexity_limit(random_cloud):
    vertices = compute_concave_hull(random_cloud, math.inf)
    reference = ConvexHull(random_cloud)
    assert (set(map(tuple, vertices[:-1])) ==
            set(map(tuple, random_cloud[reference.vertices])))
    assert len(vertices) - 1 == len(reference.vertices)


@pytest.mark.parametrize('seed', [0, 1, 4])
def test_area_grows_with_concavity(seed):
    points = np.random.default_rng(seed).random((80, 2)) * 100
    areas = [abs(polygon_area(compute_concave_hull(points, concavity)))
             for concavity in (0, 0.5, 1, 1.5, 2, 3, 5, 8, 13, math.inf)]
    for smaller, larger in zip(areas, areas[1:]):
        assert larger >= smaller - 1e-9
    assert areas[-1] == pytest.approx(ConvexHull(points).volume)


def test_question_mark_area_grows_with_concavity(question_mark):
    areas = [abs(polygon_area(compute_concave_hull(question_mark,
                                                   concavity)))
             for concavity in (0, 1.5, 2, 3)]
    assert areas == sorted(areas)
    assert areas[-1] <= ConvexHull(question_mark).volume + 1e-9


def test_convexity_limit_on_grid(u_shape):
    vertices = compute_concave_hull(u_shape, math.inf)
    reference = ConvexHull(u_shape)
    assert (set(map(tuple, vertices[:-1])) ==
            set(map(tuple, u_shape[reference.vertices])))
    assert concave_hull_indices(u_shape, math.inf) == \
        convex_hull_indices(u_shape)


def test_deterministic(random_cloud):
    first = concave_hull_indices(random_cloud, 1.5)
    for _ in range(3):
        assert concave_hull_indices(random_cloud, 1.5) == first


def test_indices_match_coordinates(random_cloud):
    hull = concave_hull_indices(random_cloud, 2)
    assert np.array_equal(random_cloud[hull],
                          compute_concave_hull(random_cloud, 2))
