from . import utils
from .concave_hull import compute_concave_hull, concave_hull_indices
from .config import DEFAULT_CONFIG, TraceConfig
from .core import contain
from .core import index
from .core import intersect
from .core import select
from .core import trace
from .shapes import convex_hull_indices, gift_opening
from .utils.error import (ConcaveHullError, DegenerateInputError,
                          InsufficientPointsError, TraceFailedError)


__all__ = [
    'compute_concave_hull',
    'concave_hull_indices',
    'convex_hull_indices',
    'gift_opening',
    'TraceConfig',
    'DEFAULT_CONFIG',
    'ConcaveHullError',
    'InsufficientPointsError',
    'DegenerateInputError',
    'TraceFailedError',
    'contain',
    'index',
    'intersect',
    'select',
    'trace',
    'utils'
]
