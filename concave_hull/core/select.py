# -*- coding: utf-8 -*-
"""
Ranking of the candidates for the next hull vertex.
"""

from concave_hull.utils.angle import signed_angle
from concave_hull.utils.geometry import distance


def candidate_key(points, current, heading, candidate):
    """
    The sort key of a candidate: turn angle, then edge length, then index.
    """
    p = points[current]
    c = points[candidate]
    direction = (c[0] - p[0], c[1] - p[1])
    return (signed_angle(heading, direction), distance(p, c), candidate)


def rank_candidates(points, current, heading, candidates):
    """
    Orders candidates by the clockwise turn needed to reach them.

    Parameters
    ----------
    points : (Mx2) array-like
        The x and y coordinates of all points.
    current : int
        The index of the current hull vertex.
    heading : (1x2) array-like
        The direction of the previous hull edge.
    candidates : iterable of int
        The indices of the eligible points.

    Returns
    -------
    ranked : list of int
        The candidates, smallest turn first. Equal turns are ordered by
        shorter edge and then by lower index.
    """
    return sorted(candidates,
                  key=lambda c: candidate_key(points, current, heading, c))
