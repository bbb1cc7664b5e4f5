import math

import numpy as np
import pytest

from concave_hull.core.index import ActiveIndex


@pytest.fixture
def grid():
    xs, ys = np.meshgrid(np.arange(5.0), np.arange(5.0))
    return np.column_stack([xs.ravel(), ys.ravel()])


def test_nearest_orders_by_distance(grid):
    index = ActiveIndex(grid)
    ids = index.nearest((0.1, 0.2), 3)
    assert ids[0] == 0
    dists = [math.hypot(*(grid[i] - (0.1, 0.2))) for i in ids]
    assert dists == sorted(dists)
    assert len(ids) == 3


def test_nearest_ties_by_index(square):
    index = ActiveIndex(square)
    assert index.nearest((0.5, 0.5), 1) == [0]
    assert index.nearest((0.5, 0.5), 2) == [0, 1]


def test_nearest_returns_all_remaining(square):
    index = ActiveIndex(square)
    assert sorted(index.nearest((0, 0), 10)) == [0, 1, 2, 3]
    assert index.nearest((0, 0), 0) == []


def test_within_radius_is_inclusive(grid):
    index = ActiveIndex(grid)
    # (2, 2) is index 12; its 4-neighbourhood at distance 1
    assert index.within_radius((2, 2), 1.0) == [7, 11, 12, 13, 17]
    assert index.within_radius((2, 2), 0.5) == [12]
    assert index.within_radius((20, 20), 1.0) == []


def test_within_infinite_radius(grid):
    index = ActiveIndex(grid)
    index.remove(3)
    assert index.within_radius((0, 0), math.inf) == [i for i in range(25)
                                                     if i != 3]


def test_remove_is_idempotent(grid):
    index = ActiveIndex(grid)
    index.remove(12)
    index.remove(12)
    assert len(index) == 24
    assert 12 not in index
    assert index.nearest((2, 2), 1) != [12]
    assert 12 not in index.within_radius((2, 2), 1.0)


def test_reset_to_full(grid):
    index = ActiveIndex(grid)
    for i in range(0, 25, 2):
        index.remove(i)
    index.reset_to_full()
    assert len(index) == 25
    assert index.active() == list(range(25))
    assert index.nearest((2, 2), 1) == [12]


def test_queries_while_shrinking_to_empty(grid):
    index = ActiveIndex(grid)
    order = np.random.default_rng(3).permutation(25)
    for removed, i in enumerate(order, 1):
        index.remove(int(i))
        remaining = set(range(25)) - set(int(j) for j in order[:removed])
        assert set(index.within_radius((2, 2), 10.0)) == remaining
        if remaining:
            q = grid[min(remaining)]
            assert index.nearest(q, 1) == [min(remaining)]
    assert len(index) == 0
    assert index.nearest((0, 0), 3) == []
    assert index.within_radius((0, 0), 10.0) == []


def test_duplicates_are_distinct():
    points = np.array([[0.0, 0.0], [0.0, 0.0], [1.0, 0.0]])
    index = ActiveIndex(points)
    assert index.nearest((0, 0), 2) == [0, 1]
    index.remove(0)
    assert index.nearest((0, 0), 1) == [1]
