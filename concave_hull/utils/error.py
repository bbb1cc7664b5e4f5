# -*- coding: utf-8 -*-
"""
Exceptions raised by the concave hull computation.
"""


class ConcaveHullError(ValueError):
    """Base class of every error raised for an unusable point cloud."""

    def __init__(self, message, vertex=None, remaining=None):
        super(ConcaveHullError, self).__init__(message)
        self.vertex = vertex
        self.remaining = remaining


class InsufficientPointsError(ConcaveHullError):
    """Fewer than three (distinct) points were supplied."""


class DegenerateInputError(ConcaveHullError):
    """
    The points do not span a plane, contain non-finite coordinates, or
    make the angular ranking undefined.
    """


class TraceFailedError(ConcaveHullError):
    """No valid candidate was found even without a radius restriction."""
