# -*- coding: utf-8 -*-
"""
Drawing of a point cloud and its hull.
"""

import numpy as np
from shapely.geometry import MultiPoint, Point

from concave_hull.utils.geometry import as_points


def plot_concave_hull(coords, hull, output=None, figsize=(10, 10),
                      cmap='viridis'):
    """
    Plots the points, their convex hull and a concave hull.

    The edges of the concave hull are coloured along a gradient following
    the order of the vertices, showing the winding order.

    :param coords: numpy.ndarray, shapely coordinate sequence
        The points the hull was computed from
    :param hull: numpy.ndarray
        The vertices of the hull, in order
    :param output: str, optional
        Image file to save the figure to. The figure is shown if not given
    :param figsize: tuple
        Figure size
    :param cmap: str
        Matplotlib colormap of the winding gradient
    :return: matplotlib Figure
    """
    import geopandas as gpd
    import matplotlib.pyplot as plt
    from matplotlib.collections import LineCollection
    from matplotlib.lines import Line2D
    from matplotlib.patches import Patch

    coords = as_points(coords)
    hull = as_points(hull)
    if len(hull) > 0 and not np.array_equal(hull[0], hull[-1]):
        hull = np.vstack([hull, hull[:1]])

    fig, ax = plt.subplots(figsize=figsize)
    legend_elements = []

    gpd.GeoSeries([MultiPoint(coords).convex_hull]).plot(ax=ax,
                                                         color='w',
                                                         edgecolor='#5ac5bc',
                                                         linewidth=5)
    legend_elements += [Patch(facecolor='w',
                              edgecolor='#5ac5bc',
                              linewidth=2,
                              label='convex hull')]

    segments = np.stack([hull[:-1], hull[1:]], axis=1)
    edges = LineCollection(segments, cmap=cmap, linewidths=3)
    edges.set_array(np.arange(len(segments)))
    ax.add_collection(edges)
    fig.colorbar(edges, ax=ax, label='edge order')
    legend_elements += [Line2D([0], [0], color=plt.get_cmap(cmap)(0.5),
                               linewidth=3,
                               label='concave hull')]

    gpd.GeoSeries([Point(c) for c in coords]).plot(ax=ax,
                                                   color='purple',
                                                   markersize=8)
    legend_elements += [Line2D([0], [0], markersize=8, color='w',
                               markerfacecolor='purple',
                               marker='o',
                               label='points')]

    ax.set_aspect('equal')
    ax.legend(handles=legend_elements)

    if output is not None:
        fig.savefig(output)
        plt.close(fig)
    else:
        plt.show()
    return fig
