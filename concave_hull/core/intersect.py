# -*- coding: utf-8 -*-
"""
Checks of proposed hull edges against the committed ones.
"""

from concave_hull.utils.geometry import segments_intersect


def crosses_edges(points, a, b, edges):
    """
    Checks if the edge a-b intersects any of the given edges.

    Edges sharing a vertex with a-b are still tested, but only block it
    when they overlap it, since segments_intersect ignores a shared
    endpoint.

    Parameters
    ----------
    points : (Mx2) array-like
        The x and y coordinates of all points.
    a, b : int
        The indices of the endpoints of the proposed edge.
    edges : iterable of (int, int)
        The committed edges as pairs of point indices.

    Returns
    -------
    crosses : bool
        True if the proposed edge intersects a committed edge.
    """
    pa = points[a]
    pb = points[b]
    # bounding box of the proposed edge, to skip far away edges cheaply
    min_x, max_x = min(pa[0], pb[0]), max(pa[0], pb[0])
    min_y, max_y = min(pa[1], pb[1]), max(pa[1], pb[1])
    for i, j in edges:
        pi = points[i]
        pj = points[j]
        if (max(pi[0], pj[0]) < min_x or min(pi[0], pj[0]) > max_x or
                max(pi[1], pj[1]) < min_y or min(pi[1], pj[1]) > max_y):
            continue
        if segments_intersect(pa, pb, pi, pj):
            return True
    return False


def is_simple(points, hull):
    """
    Checks that no two edges of a closed hull intersect.

    Parameters
    ----------
    points : (Mx2) array-like
        The x and y coordinates of all points.
    hull : list of int
        The hull as point indices, first index repeated at the end.

    Returns
    -------
    simple : bool
    """
    edges = list(zip(hull[:-1], hull[1:]))
    for k, (a, b) in enumerate(edges):
        if crosses_edges(points, a, b, edges[k + 1:]):
            return False
    return True
