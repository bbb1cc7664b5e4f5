# -*- coding: utf-8 -*-
"""
Dynamic spatial index over the points that are not yet part of the hull.

The index keeps every point of the cloud in an R-tree and deletes points as
they are committed to the hull, so that queries only ever see the active
points and do not slow down as the active set shrinks.
"""

import math

import numpy as np
import rtree


class ActiveIndex(object):
    def __init__(self, points):
        """
        Builds the index over all points.

        Parameters
        ----------
        points : (Mx2) array
            The x and y coordinates of the points.

        Attributes
        ----------
        points : (Mx2) array
            The x and y coordinates of the points.
        removed : set of int
            The indices of the points deleted from the index.
        """
        self.points = np.asarray(points, dtype=float)
        # rtree bounds (min x, min y, max x, max y) of each point
        self.c_bounds = np.hstack([self.points, self.points])
        self.removed = set()
        self.rt_idx = rtree.index.Index(
            (i, tuple(b), None) for i, b in enumerate(self.c_bounds)
        )

    def __len__(self):
        return len(self.points) - len(self.removed)

    def __contains__(self, idx):
        return 0 <= idx < len(self.points) and idx not in self.removed

    def active(self):
        """The indices of the active points in ascending order."""
        return [i for i in range(len(self.points)) if i not in self.removed]

    def _distances(self, q, ids):
        return np.hypot(*(self.points[ids] - q).T)

    def nearest(self, q, k):
        """
        The k active points nearest to a query point.

        Parameters
        ----------
        q : (1x2) array-like
            The query point.
        k : int
            The number of neighbours.

        Returns
        -------
        ids : list of int
            Up to k indices, ordered by ascending distance and then by
            index. All active points if fewer than k remain.
        """
        if k <= 0 or len(self) == 0:
            return []
        q = np.asarray(q, dtype=float)
        # rtree returns every point tied at the k-th distance
        ids = np.fromiter(self.rt_idx.nearest((q[0], q[1], q[0], q[1]), k),
                          dtype=int)
        order = np.lexsort((ids, self._distances(q, ids)))
        return [int(i) for i in ids[order][:k]]

    def within_radius(self, q, r):
        """
        The active points within a distance of a query point.

        Parameters
        ----------
        q : (1x2) array-like
            The query point.
        r : float
            The search radius, inclusive. math.inf returns every active
            point.

        Returns
        -------
        ids : list of int
            The indices in ascending order.
        """
        if math.isinf(r):
            return self.active()
        if r < 0 or len(self) == 0:
            return []
        q = np.asarray(q, dtype=float)
        ids = np.fromiter(
            self.rt_idx.intersection((q[0] - r, q[1] - r, q[0] + r, q[1] + r)),
            dtype=int
        )
        ids = np.sort(ids[self._distances(q, ids) <= r])
        return [int(i) for i in ids]

    def remove(self, idx):
        """Deletes a point from the index. Removing it twice is a no-op."""
        if idx in self.removed:
            return
        self.rt_idx.delete(idx, tuple(self.c_bounds[idx]))
        self.removed.add(idx)

    def reset_to_full(self):
        """Restores every removed point."""
        for idx in sorted(self.removed):
            self.rt_idx.insert(idx, tuple(self.c_bounds[idx]))
        self.removed.clear()
