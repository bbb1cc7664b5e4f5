# -*- coding: utf-8 -*-
"""
Command line interface: python -m concave_hull points.csv 3 -o hull.csv
"""

import argparse
import logging
import sys

from concave_hull.concave_hull import concave_hull_indices
from concave_hull.io import read_points, write_points
from concave_hull.logging_config import setup_logging
from concave_hull.shapes.gift_opening import gift_opening

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        'concave_hull',
        description='Compute the concave hull of a 2D point cloud.'
    )
    parser.add_argument('input', type=str,
                        help='CSV file with the x and y coordinates')
    parser.add_argument('concavity', type=float,
                        help='concavity, "inf" for the convex hull; the edge '
                             'length threshold with --method opening')
    parser.add_argument('-o', '--output', default='output.csv', type=str,
                        help='CSV file to write the hull vertices to')
    parser.add_argument('--image', default=None, type=str,
                        help='image file to draw the hull to')
    parser.add_argument('--method', default='trace',
                        choices=['trace', 'opening'],
                        help='boundary tracing or gift opening')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log the retries of the tracer')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        points = read_points(args.input)
        logger.info('Computing the hull of %d points from %s [concavity: %g]',
                    len(points), args.input, args.concavity)
        if args.method == 'opening':
            hull = gift_opening(points, args.concavity)
        else:
            hull = concave_hull_indices(points, args.concavity)
    except (ValueError, OSError) as e:
        print('error: {}'.format(e), file=sys.stderr)
        return 1

    vertices = points[hull]
    write_points(args.output, vertices)
    logger.info('Wrote %d hull vertices to %s', len(hull) - 1, args.output)

    if args.image is not None:
        from concave_hull.plot import plot_concave_hull
        plot_concave_hull(points, vertices, output=args.image)

    return 0


if __name__ == '__main__':
    sys.exit(main())
