# -*- coding: utf-8 -*-
"""
Validation that a closed hull encloses the whole point cloud.

A point counts as enclosed only when both the crossing-number test of
utils.geometry and shapely agree that it is inside or on the boundary.
"""

import numpy as np
import shapely

from concave_hull.utils import to_polygon
from concave_hull.utils.geometry import OUTSIDE, as_points, locate_points


def outside_points(points, polygon, tolerance=0.0):
    """
    The indices of the points lying outside a polygon.

    Parameters
    ----------
    points : (Mx2) array-like
        The x and y coordinates of the points.
    polygon : (Nx2) array-like
        The vertices of the polygon.
    tolerance : float
        Points within this distance of the boundary are on it.

    Returns
    -------
    indices : (1xK) int array
    """
    points = as_points(points)
    outside = locate_points(points, polygon, tolerance) == OUTSIDE

    shape = to_polygon(polygon)
    if tolerance > 0:
        shape = shape.buffer(tolerance)
    shapely.prepare(shape)
    outside |= ~shapely.intersects_xy(shape, points[:, 0], points[:, 1])

    return np.flatnonzero(outside)


def contains_all(points, polygon, tolerance=0.0):
    """Checks that every point is inside or on the boundary of a polygon."""
    return len(outside_points(points, polygon, tolerance)) == 0
