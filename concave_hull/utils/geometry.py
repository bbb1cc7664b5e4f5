# -*- coding: utf-8 -*-
"""
Geometric primitives over 2D points.

Points are rows of an (Nx2) float array. Every predicate raises
DegenerateInputError instead of comparing NaN values.
"""

import math

import numpy as np

from concave_hull.utils.error import (DegenerateInputError,
                                      InsufficientPointsError)

# Locations returned by point_in_polygon, following cv2.pointPolygonTest.
INSIDE = 1
ON_BOUNDARY = 0
OUTSIDE = -1


def as_points(points):
    """
    Converts an array-like to an (Nx2) float array of finite coordinates.

    Parameters
    ----------
    points : (Mx2) array-like
        The x and y coordinates of the points.

    Returns
    -------
    points : (Mx2) array
        The coordinates as floats.

    Raises
    ------
    ValueError
        If the input does not have two columns.
    DegenerateInputError
        If any coordinate is NaN or infinite.
    """
    points = np.asarray(points, dtype=float)
    if points.size == 0:
        return points.reshape(0, 2)
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError('Points should be an (Mx2) array, '
                         'got shape {}.'.format(points.shape))
    if not np.isfinite(points).all():
        raise DegenerateInputError('Points contain NaN or infinite '
                                   'coordinates.')
    return points


def bounding_diagonal(points):
    """The length of the diagonal of the bounding box of the points."""
    extent = points.max(axis=0) - points.min(axis=0)
    return math.hypot(*extent)


def validate_cloud(points, tolerance=1e-9):
    """
    Checks that a point cloud can be wrapped by a polygon.

    Parameters
    ----------
    points : (Mx2) array-like
        The x and y coordinates of the points.
    tolerance : float
        Relative tolerance on the spread perpendicular to the main axis
        below which the points are considered collinear.

    Returns
    -------
    points : (Mx2) array
        The coordinates as floats.

    Raises
    ------
    InsufficientPointsError
        If there are fewer than three (distinct) points.
    DegenerateInputError
        If all points are collinear or not finite.
    """
    points = as_points(points)
    if len(points) < 3:
        raise InsufficientPointsError(
            'At least 3 points are needed, got {}.'.format(len(points)),
            remaining=len(points)
        )

    unique = np.unique(points, axis=0)
    if len(unique) < 3:
        raise InsufficientPointsError(
            'At least 3 distinct points are needed, '
            'got {}.'.format(len(unique)),
            remaining=len(unique)
        )

    # the second singular value measures the spread off the main axis
    singular = np.linalg.svd(unique - unique.mean(axis=0), compute_uv=False)
    if singular[1] <= tolerance * singular[0]:
        raise DegenerateInputError('All points are collinear.',
                                   remaining=len(unique))

    return points


def distance(p1, p2):
    """
    The euclidean distance between two points.

    Parameters
    ----------
    p1 : list or array
        A point in 2D space.
    p2 : list or array
        A point in 2D space.

    Returns
    -------
    distance : float
        The euclidean distance between the two points.
    """
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


def orientation(a, b, c):
    """
    The cross product of (b - a) and (c - a).

    Positive when c lies to the left of the directed line a -> b, negative
    when it lies to the right and zero when the three points are collinear.
    """
    cross = ((b[0] - a[0]) * (c[1] - a[1]) -
             (b[1] - a[1]) * (c[0] - a[0]))
    if math.isnan(cross):
        raise DegenerateInputError('Orientation of non-finite points is '
                                   'undefined.')
    return cross


def _same(p1, p2):
    return p1[0] == p2[0] and p1[1] == p2[1]


def _within_box(p, a, b):
    return (min(a[0], b[0]) <= p[0] <= max(a[0], b[0]) and
            min(a[1], b[1]) <= p[1] <= max(a[1], b[1]))


def _collinear_overlap(a1, a2, b1, b2):
    d = (a2[0] - a1[0], a2[1] - a1[1])
    length2 = d[0] * d[0] + d[1] * d[1]
    if length2 == 0:
        return _within_box(a1, b1, b2) and not (_same(a1, b1) or
                                                _same(a1, b2))

    t1 = ((b1[0] - a1[0]) * d[0] + (b1[1] - a1[1]) * d[1]) / length2
    t2 = ((b2[0] - a1[0]) * d[0] + (b2[1] - a1[1]) * d[1]) / length2
    overlap = min(1.0, max(t1, t2)) - max(0.0, min(t1, t2))
    # touching in a single point means the segments share an endpoint
    return overlap > 0


def segments_intersect(a1, a2, b1, b2):
    """
    Checks if segment a1-a2 intersects segment b1-b2.

    Segments that only share an endpoint do not intersect, as consecutive
    polygon edges share a vertex. Collinear segments that overlap along a
    stretch do intersect, and so does an endpoint touching the interior of
    the other segment.

    Parameters
    ----------
    a1, a2 : (1x2) array-like
        The endpoints of the first segment.
    b1, b2 : (1x2) array-like
        The endpoints of the second segment.

    Returns
    -------
    intersect : bool
        True if the segments cross or touch outside a shared endpoint.
    """
    o1 = orientation(a1, a2, b1)
    o2 = orientation(a1, a2, b2)
    o3 = orientation(b1, b2, a1)
    o4 = orientation(b1, b2, a2)

    if o1 == 0 and o2 == 0:
        return _collinear_overlap(a1, a2, b1, b2)

    if _same(a1, b1) or _same(a1, b2) or _same(a2, b1) or _same(a2, b2):
        return False

    if ((o1 > 0 and o2 < 0 or o1 < 0 and o2 > 0) and
            (o3 > 0 and o4 < 0 or o3 < 0 and o4 > 0)):
        return True

    # an endpoint lying on the other segment
    return ((o1 == 0 and _within_box(b1, a1, a2)) or
            (o2 == 0 and _within_box(b2, a1, a2)) or
            (o3 == 0 and _within_box(a1, b1, b2)) or
            (o4 == 0 and _within_box(a2, b1, b2)))


def open_ring(polygon):
    """Drops the closing vertex of a polygon ring if it is present."""
    polygon = as_points(polygon)
    if len(polygon) > 1 and _same(polygon[0], polygon[-1]):
        return polygon[:-1]
    return polygon


def locate_points(points, polygon, tolerance=0.0):
    """
    Locates points relative to a polygon with a crossing-number test.

    Parameters
    ----------
    points : (Mx2) array-like
        The points to locate.
    polygon : (Nx2) array-like
        The vertices of the polygon, with or without closing vertex.
    tolerance : float
        Points within this distance of an edge are on the boundary.

    Returns
    -------
    location : (1xM) int array
        INSIDE, ON_BOUNDARY or OUTSIDE for each point.
    """
    points = as_points(points)
    ring = open_ring(polygon)
    x = points[:, 0]
    y = points[:, 1]

    inside = np.zeros(len(points), dtype=bool)
    boundary = np.zeros(len(points), dtype=bool)
    for a, b in zip(ring, np.roll(ring, -1, axis=0)):
        dx, dy = b - a
        length2 = dx * dx + dy * dy
        if length2 > 0:
            t = np.clip(((x - a[0]) * dx + (y - a[1]) * dy) / length2, 0, 1)
        else:
            t = np.zeros(len(points))
        gap = np.hypot(x - (a[0] + t * dx), y - (a[1] + t * dy))
        boundary |= gap <= tolerance

        straddle = (a[1] > y) != (b[1] > y)
        with np.errstate(divide='ignore', invalid='ignore'):
            x_cross = a[0] + (y - a[1]) * dx / dy
        inside ^= straddle & (x < x_cross)

    return np.where(boundary, ON_BOUNDARY, np.where(inside, INSIDE, OUTSIDE))


def point_in_polygon(p, polygon, tolerance=0.0):
    """
    Locates a single point relative to a polygon.

    Returns
    -------
    location : int
        INSIDE, ON_BOUNDARY or OUTSIDE.
    """
    return int(locate_points([p], polygon, tolerance)[0])


def polygon_area(polygon):
    """
    The signed area of a polygon (shoelace formula).

    Positive for counter-clockwise rings, negative for clockwise rings.
    """
    ring = open_ring(polygon)
    x = ring[:, 0]
    y = ring[:, 1]
    return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))


def is_clockwise(polygon):
    """Checks if the vertices of a polygon are ordered clockwise."""
    return polygon_area(polygon) < 0
