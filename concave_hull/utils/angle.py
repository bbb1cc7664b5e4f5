# -*- coding: utf-8 -*-
"""
Angle helpers used to rank hull candidates.

direction_angle: the angle of a vector against the positive x-axis, in
radians within (-pi, pi].

signed_angle: the clockwise sweep from the reversed heading to a candidate
direction. Boundary tracing walks clockwise, so the interior is always on the
right-hand side; sweeping clockwise from the reversed heading meets the
outermost candidate first.
"""

import math

TWO_PI = 2 * math.pi

# Heading assumed before the first hull edge exists.
START_HEADING = (-1.0, 0.0)


def direction_angle(vector):
    """
    The angle of a vector measured counter-clockwise from the x-axis.

    Parameters
    ----------
    vector : (1x2) array-like
        The x and y components of the vector.

    Returns
    -------
    angle : float
        The angle in radians, within (-pi, pi].
    """
    return math.atan2(vector[1], vector[0])


def signed_angle(heading, direction):
    """
    The clockwise turn from a heading to a new direction.

    The turn is measured as a clockwise sweep starting at the reversed
    heading, i.e. the direction pointing back along the previous edge. A
    straight continuation therefore scores pi, a turn to the left (out of
    the polygon) scores less than pi, a turn to the right scores more, and
    folding straight back over the previous edge scores 2 * pi.

    Parameters
    ----------
    heading : (1x2) array-like
        The direction of the previous edge.
    direction : (1x2) array-like
        The direction of the candidate edge.

    Returns
    -------
    angle : float
        The turn in radians, within (0, 2 * pi].
    """
    back = math.atan2(-heading[1], -heading[0])
    angle = (back - direction_angle(direction)) % TWO_PI
    if angle <= 0:
        angle = TWO_PI
    return angle
