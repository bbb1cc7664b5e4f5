# -*- coding: utf-8 -*-
"""
Gift opening: a concave hull obtained by splitting convex hull edges.

The edges of the convex hull are kept on a heap ordered by length. As long
as the longest edge is longer than the threshold, it is split at the point
that sees it under the smallest angle, unless that point is already on the
boundary or the two new edges would intersect the existing ones. An edge
that cannot be split is final.
"""

import heapq
import logging
import math

import numpy as np

from concave_hull.core.intersect import crosses_edges
from concave_hull.shapes.convex import convex_hull_indices
from concave_hull.utils import create_pairs
from concave_hull.utils.geometry import validate_cloud

logger = logging.getLogger(__name__)


def split_candidate(points, i, j):
    """
    Finds the point to split edge i-j with.

    The score of a point p is the largest of the angle between the edge and
    p - points[i], and the angle between the edge and points[j] - p. The
    point with the lowest score wins, ties broken by lowest index.

    Parameters
    ----------
    points : (Mx2) array
        The x and y coordinates of all points.
    i, j : int
        The indices of the endpoints of the edge.

    Returns
    -------
    idx : int or None
        The index of the best point, None if there is no other point.
    """
    edge = points[j] - points[i]
    e1 = points - points[i]
    e2 = points[j] - points
    n1 = np.hypot(*e1.T)
    n2 = np.hypot(*e2.T)
    norm = np.hypot(*edge)

    with np.errstate(divide='ignore', invalid='ignore'):
        a1 = np.arccos(np.clip(e1 @ edge / (n1 * norm), -1.0, 1.0))
        a2 = np.arccos(np.clip(e2 @ edge / (n2 * norm), -1.0, 1.0))
    score = np.maximum(a1, a2)
    # the endpoints themselves and points coinciding with them
    score[(n1 == 0) | (n2 == 0)] = np.inf
    score[[i, j]] = np.inf

    best = int(np.argmin(score))
    if math.isinf(score[best]):
        return None
    return best


def _chain(edges, first):
    successor = dict(edges)
    hull = [first]
    while len(hull) <= len(edges):
        hull.append(successor[hull[-1]])
    return hull


def gift_opening(points, length_threshold, tolerance=1e-9):
    """
    Computes a concave hull by opening up the convex hull.

    Parameters
    ----------
    points : (Mx2) array-like
        The x and y coordinates of the points.
    length_threshold : float
        Edges longer than this are split when possible. math.inf returns
        the convex hull.
    tolerance : float
        Relative tolerance of the collinearity check.

    Returns
    -------
    hull : list of int
        The indices of the hull vertices in clockwise order, the first
        index repeated at the end.
    """
    length_threshold = float(length_threshold)
    if math.isnan(length_threshold) or length_threshold < 0:
        raise ValueError('Length threshold should be a non-negative number, '
                         'got {}.'.format(length_threshold))

    points = validate_cloud(points, tolerance)
    convex = convex_hull_indices(points, tolerance)
    if len(points) <= 3:
        return convex

    coords = [(float(x), float(y)) for x, y in points]

    def length2(i, j):
        return ((coords[j][0] - coords[i][0]) ** 2 +
                (coords[j][1] - coords[i][1]) ** 2)

    # by coordinates, so a duplicate of a hull vertex is never inserted
    boundary = set(coords[v] for v in convex)
    edge_heap = [(-length2(i, j), i, j) for i, j in create_pairs(convex[:-1])]
    heapq.heapify(edge_heap)
    # compare squared lengths
    threshold = length_threshold ** 2

    final = []
    while edge_heap:
        neg_length, i, j = heapq.heappop(edge_heap)
        if -neg_length > threshold:
            best = split_candidate(points, i, j)
            if best is not None and coords[best] not in boundary:
                existing = final + [(a, b) for _, a, b in edge_heap]
                if not (crosses_edges(coords, i, best, existing) or
                        crosses_edges(coords, best, j, existing)):
                    heapq.heappush(edge_heap, (-length2(i, best), i, best))
                    heapq.heappush(edge_heap, (-length2(best, j), best, j))
                    boundary.add(coords[best])
                    continue
        final.append((i, j))

    logger.debug('Opened %d convex edges into %d hull edges.',
                 len(convex) - 1, len(final))
    return _chain(final, convex[0])
