# -*- coding: utf-8 -*-
"""
Reading point clouds from and writing hulls to CSV files.
"""

import warnings

import pandas as pd

from concave_hull.utils.geometry import as_points


def read_points(path):
    """
    Reads 2D points from a CSV file.

    The first two columns hold the x and y coordinates. A header row is
    detected by its non-numeric values and skipped.

    Parameters
    ----------
    path : str or path-like
        The CSV file.

    Returns
    -------
    points : (Mx2) array
        The x and y coordinates of the points.
    """
    frame = pd.read_csv(path, header=None, skipinitialspace=True)
    if frame.shape[1] < 2:
        raise ValueError('Expected x and y columns in {}.'.format(path))
    if frame.shape[1] > 2:
        warnings.warn('Only the first two columns of {} are used.'.format(path))

    frame = frame.iloc[:, :2]
    first = pd.to_numeric(frame.iloc[0], errors='coerce')
    if first.isna().any():
        frame = frame.iloc[1:]

    return as_points(frame.astype(float).to_numpy())


def write_points(path, coords):
    """
    Writes the vertices of a hull to a CSV file, one x,y pair per row.

    Parameters
    ----------
    path : str or path-like
        The CSV file.
    coords : (Mx2) array-like
        The coordinates to write.
    """
    frame = pd.DataFrame(as_points(coords), columns=['x', 'y'])
    frame.to_csv(path, index=False, header=False)
