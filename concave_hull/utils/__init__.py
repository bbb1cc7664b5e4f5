# -*- coding: utf-8 -*-
"""
Small helpers shared by the hull algorithms.
"""

from shapely.geometry import Polygon

from . import angle
from . import error
from . import geometry


def create_pairs(items):
    """
    Creates the pairs of consecutive items, wrapping around at the end.

    Parameters
    ----------
    items : sequence
        The items to pair up.

    Returns
    -------
    pairs : list of tuple
        (items[0], items[1]), ..., (items[-1], items[0]).
    """
    items = list(items)
    return list(zip(items, items[1:] + items[:1]))


def to_polygon(coords):
    """
    Creates a shapely Polygon from the vertices of a hull.

    Parameters
    ----------
    coords : (Mx2) array-like
        The vertices, with or without closing vertex.

    Returns
    -------
    polygon : shapely Polygon
    """
    return Polygon(geometry.open_ring(coords))


__all__ = [
    'angle',
    'error',
    'geometry',
    'create_pairs',
    'to_polygon',
]
