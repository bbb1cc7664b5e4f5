# -*- coding: utf-8 -*-
"""
Convex hull of a point cloud, in the same vertex order as the traced hulls.
"""

import numpy as np
from scipy.spatial import ConvexHull

from concave_hull.utils.geometry import validate_cloud


def convex_hull_indices(points, tolerance=1e-9):
    """
    Computes the convex hull of a set of 2D points.

    Parameters
    ----------
    points : (Mx2) array-like
        The x and y coordinates of the points.
    tolerance : float
        Relative tolerance of the collinearity check.

    Returns
    -------
    hull : list of int
        The indices of the hull vertices in clockwise order, starting (and
        ending) at the lowest vertex, ties broken by lowest x.
    """
    points = validate_cloud(points, tolerance)
    # qhull lists 2D hull vertices counter-clockwise
    vertices = ConvexHull(points).vertices[::-1]
    first = np.lexsort((points[vertices, 0], points[vertices, 1]))[0]
    vertices = [int(v) for v in np.roll(vertices, -first)]
    return vertices + vertices[:1]
