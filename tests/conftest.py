"""Shared point clouds for the hull tests."""

import numpy as np
import pytest
import shapely
from shapely.geometry import LineString, Point
from shapely.ops import unary_union


def question_mark_points(spacing=1.0):
    """Grid points covering a question mark shape: a hook, a stem and a dot."""
    angles = np.radians(np.linspace(200, -60, 40))
    hook = np.column_stack([12 * np.cos(angles), 30 + 12 * np.sin(angles)])
    stroke = LineString(np.vstack([hook, [[0, 14], [0, 8]]])).buffer(2.5)
    shape = unary_union([stroke, Point(0, 0).buffer(3)])

    xs, ys = np.meshgrid(np.arange(-20, 21, spacing),
                         np.arange(-5, 48, spacing))
    xs = xs.ravel()
    ys = ys.ravel()
    keep = shapely.intersects_xy(shape, xs, ys)
    return np.column_stack([xs[keep], ys[keep]])


def u_shape_points():
    """Grid points of a U: two columns joined at the bottom."""
    xs, ys = np.meshgrid(np.arange(0, 11, 1.0), np.arange(0, 11, 1.0))
    points = np.column_stack([xs.ravel(), ys.ravel()])
    keep = (points[:, 0] <= 2) | (points[:, 0] >= 8) | (points[:, 1] <= 2)
    return points[keep]


@pytest.fixture
def square():
    return np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])


@pytest.fixture
def question_mark():
    return question_mark_points()


@pytest.fixture
def u_shape():
    return u_shape_points()


@pytest.fixture
def random_cloud():
    rng = np.random.default_rng(42)
    return rng.random((60, 2)) * 100


@pytest.fixture
def sparse_cloud():
    """A dense cluster with a few far away points."""
    rng = np.random.default_rng(7)
    cluster = rng.normal(0, 1, (40, 2))
    outliers = np.array([[15.0, 2.0], [-12.0, 9.0], [3.0, -20.0]])
    return np.vstack([cluster, outliers])
