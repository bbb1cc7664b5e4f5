# -*- coding: utf-8 -*-
"""
Entry points computing the concave hull of a 2D point cloud.
"""

from concave_hull.core.trace import HullTracer


def concave_hull_indices(points, concavity, config=None):
    """
    Traces the concave hull of a set of 2D points.

    Parameters
    ----------
    points : (Mx2) array-like
        The x and y coordinates of the points. At least three distinct,
        non-collinear points are needed; exact duplicates are allowed.
    concavity : float
        The search radius of each step relative to the distance to the
        nearest remaining point. 0 gives the tightest hull, math.inf the
        convex hull. Snapped down to the concavity grid of the tracer, so
        the hull area never decreases as the concavity grows.
    config : TraceConfig, optional
        Growth factors and tolerances of the tracer.

    Returns
    -------
    hull : list of int
        The indices of the hull vertices in clockwise order, the first
        index repeated at the end.

    Raises
    ------
    InsufficientPointsError
        If there are fewer than three distinct points.
    DegenerateInputError
        If the points are collinear or not finite.
    TraceFailedError
        If no simple polygon could be traced.
    """
    return HullTracer(points, concavity, config=config).trace()


def compute_concave_hull(points, concavity, config=None):
    """
    Computes the concave hull of a set of 2D points.

    Takes the same parameters as concave_hull_indices.

    Returns
    -------
    vertices : (Mx2) array
        The coordinates of the hull vertices in clockwise order, the first
        vertex repeated at the end.
    """
    tracer = HullTracer(points, concavity, config=config)
    return tracer.points[tracer.trace()]
