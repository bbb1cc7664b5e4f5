# -*- coding: utf-8 -*-
"""
Boundary tracing of a point cloud.

HullTracer walks the cloud clockwise starting at its lowest point. At each
vertex the candidates are the active points within a search radius that
scales with the distance to the nearest active point; they are ranked by
turn angle and the first one whose edge crosses no committed edge becomes
the next vertex. When no candidate is valid the radius grows. A closed hull
that leaves points outside or winds counter-clockwise is traced again with
a larger concavity, until the radius covers the whole cloud and the trace
degenerates to the convex hull.
"""

import logging
import math
from collections import defaultdict

import numpy as np
from scipy.spatial import KDTree

from concave_hull.config import DEFAULT_CONFIG
from concave_hull.core.contain import outside_points
from concave_hull.core.index import ActiveIndex
from concave_hull.core.intersect import crosses_edges
from concave_hull.core.select import rank_candidates
from concave_hull.utils.angle import START_HEADING
from concave_hull.utils.error import DegenerateInputError, TraceFailedError
from concave_hull.utils.geometry import (bounding_diagonal, distance,
                                         is_clockwise, orientation,
                                         polygon_area, validate_cloud)

logger = logging.getLogger(__name__)

START = 'start'
EXTENDING = 'extending'
CLOSED = 'closed'
FAILED = 'failed'


def start_vertex(points):
    """
    The index of the lowest point, ties broken by lowest x and then index.
    """
    points = np.asarray(points, dtype=float)
    order = np.lexsort((np.arange(len(points)), points[:, 0], points[:, 1]))
    return int(order[0])


class HullTracer(object):
    def __init__(self, points, concavity, config=None):
        """
        Prepares the tracing of the hull of a point cloud.

        Parameters
        ----------
        points : (Mx2) array-like
            The x and y coordinates of the points.
        concavity : float
            The search radius relative to the nearest neighbour distance.
            0 gives the tightest hull, math.inf the convex hull.
        config : TraceConfig, optional
            Growth factors and tolerances. DEFAULT_CONFIG if not given.

        Attributes
        ----------
        state : str
            START, EXTENDING, CLOSED or FAILED.
        hull : list of int
            The committed vertices of the current attempt.
        edges : list of (int, int)
            The committed edges of the current attempt.
        attempts : int
            The number of trace attempts made.
        """
        concavity = float(concavity)
        if math.isnan(concavity) or concavity < 0:
            raise ValueError('Concavity should be a non-negative number, '
                             'got {}.'.format(concavity))

        self.config = config if config is not None else DEFAULT_CONFIG
        self.points = validate_cloud(points, self.config.tolerance)
        self.concavity = concavity

        # plain floats are much faster to index than array rows
        self.coords = [(float(x), float(y)) for x, y in self.points]
        self.tolerance = self.config.tolerance * bounding_diagonal(self.points)
        self.index = ActiveIndex(self.points)
        self.start_idx = start_vertex(self.points)
        self.convex_concavity = self._convex_concavity()

        # points sharing coordinates are consumed together
        groups = defaultdict(list)
        for i, c in enumerate(self.coords):
            groups[c].append(i)
        self.duplicates = {c: ids for c, ids in groups.items() if len(ids) > 1}

        self.state = START
        self.hull = []
        self.edges = []
        self.attempts = 0

    def _convex_concavity(self):
        """
        The concavity from which every search radius spans the whole cloud.
        """
        unique = np.unique(self.points, axis=0)
        dists, _ = KDTree(unique).query(unique, k=2)
        return bounding_diagonal(self.points) / dists[:, 1].min()

    def _grid_step(self, concavity):
        """
        The step of the largest grid concavity not above a concavity.

        The grid is min_concavity * concavity_growth ** step. Every request
        is traced from the bottom of this grid, so that the retries of a
        smaller concavity are a prefix of the retries of a larger one.
        """
        step = 0
        grid = self.config.min_concavity
        while grid * self.config.concavity_growth <= concavity:
            grid *= self.config.concavity_growth
            step += 1
        return step

    def trace(self):
        """
        Traces the hull, retrying with a larger concavity if needed.

        The concavity is snapped down to the grid of _grid_step. Attempts
        run up the grid from its bottom; the result is the largest accepted
        hull up to the requested step, or the first hull accepted above it
        when none is accepted at that step. The area of the result thus
        never decreases as the concavity grows.

        Returns
        -------
        hull : list of int
            The indices of the hull vertices in clockwise order, the first
            index repeated at the end.

        Raises
        ------
        TraceFailedError
            If even the unrestricted trace gets stuck.
        """
        self.attempts = 0
        if self.concavity >= self.convex_concavity:
            return self._trace_convex()

        max_attempts = self.config.max_attempts
        target = self._grid_step(self.concavity)
        concavity = self.config.min_concavity
        step = 0
        best = None
        while True:
            restricted = (concavity < self.convex_concavity and
                          (max_attempts is None or
                           self.attempts < max_attempts))
            if not restricted:
                if self.attempts > 0:
                    logger.info('Falling back to the convex hull after %d '
                                'attempts.', self.attempts)
                return self._trace_convex()

            if self._attempt(concavity):
                polygon = self.points[self.hull]
                outside = outside_points(self.points, polygon, self.tolerance)
                if len(outside) == 0 and is_clockwise(polygon):
                    area = -polygon_area(polygon)
                    if best is None or area > best[0]:
                        best = (area, list(self.hull), list(self.edges))
                    if step >= target:
                        _, self.hull, self.edges = best
                        logger.debug('Traced hull of %d vertices at '
                                     'concavity %g in %d attempts.',
                                     len(self.hull) - 1, concavity,
                                     self.attempts)
                        return list(self.hull)
                else:
                    logger.debug('Hull at concavity %g leaves %d points '
                                 'outside or winds counter-clockwise.',
                                 concavity, len(outside))
            else:
                logger.debug('Trace at concavity %g got stuck at vertex '
                             '%d.', concavity, self.hull[-1])

            concavity *= self.config.concavity_growth
            step += 1

    def _trace_convex(self):
        """
        Runs the unrestricted trace, which yields the convex hull.

        Vertices in the middle of a straight hull edge are dropped, so the
        vertex set matches the one of scipy.spatial.ConvexHull.
        """
        if not self._attempt(math.inf):
            raise TraceFailedError(
                'No valid candidate for vertex {} with {} points '
                'remaining.'.format(self.hull[-1], len(self.index)),
                vertex=self.hull[-1],
                remaining=len(self.index)
            )

        ring = self.hull[:-1]
        kept = [ring[0]]
        for k in range(1, len(ring)):
            prev = self.coords[ring[k - 1]]
            nxt = self.coords[ring[(k + 1) % len(ring)]]
            gap = (abs(orientation(prev, self.coords[ring[k]], nxt)) /
                   distance(prev, nxt))
            if gap > self.tolerance:
                kept.append(ring[k])

        self.hull = kept + kept[:1]
        self.edges = list(zip(self.hull[:-1], self.hull[1:]))
        logger.debug('Traced the convex hull after %d attempts.',
                     self.attempts)
        return list(self.hull)

    def _attempt(self, concavity):
        """
        Runs one trace from the start vertex.

        Returns
        -------
        closed : bool
            True if the hull closed, False if the trace got stuck.
        """
        self.attempts += 1
        logger.debug('Attempt %d at concavity %g.', self.attempts, concavity)
        self.index.reset_to_full()
        self.hull = []
        self.edges = []

        self.state = START
        current = self.start_idx
        heading = START_HEADING
        self._commit(current)
        self.state = EXTENDING

        while self.state == EXTENDING:
            candidate = self._next_vertex(current, heading, concavity)
            if candidate is None:
                self.state = FAILED
                return False

            self.edges.append((current, candidate))
            if candidate == self.start_idx:
                self.hull.append(candidate)
                self.state = CLOSED
            else:
                self._commit(candidate)
                heading = (self.coords[candidate][0] - self.coords[current][0],
                           self.coords[candidate][1] - self.coords[current][1])
                current = candidate

        return True

    def _commit(self, idx):
        self.hull.append(idx)
        self.index.remove(idx)
        for dup in self.duplicates.get(self.coords[idx], ()):
            self.index.remove(dup)

    def _next_vertex(self, current, heading, concavity):
        """
        Selects the next hull vertex.

        Returns
        -------
        idx : int or None
            The index of the selected point, None if no candidate is valid
            even when the radius spans every remaining point.
        """
        p = self.coords[current]
        closing = len(self.hull) >= 3
        start_gap = distance(p, self.coords[self.start_idx])

        nearest = self.index.nearest(p, 1)
        if nearest:
            base = distance(p, self.coords[nearest[0]])
        elif closing:
            base = start_gap
        else:
            return None

        if base == 0:
            raise DegenerateInputError(
                'Nearest neighbour of vertex {} is at zero distance.'.format(
                    current),
                vertex=current,
                remaining=len(self.index)
            )

        radius = max(concavity * base, base)
        while True:
            candidates = self.index.within_radius(p, radius)
            complete = len(candidates) == len(self.index)
            if closing:
                if start_gap <= radius:
                    candidates.append(self.start_idx)
                else:
                    complete = False

            for candidate in rank_candidates(self.coords, current, heading,
                                             candidates):
                if not crosses_edges(self.coords, current, candidate,
                                     self.edges):
                    return candidate

            if complete:
                return None
            radius *= self.config.radius_growth
            logger.debug('Growing search radius of vertex %d to %g.',
                         current, radius)
