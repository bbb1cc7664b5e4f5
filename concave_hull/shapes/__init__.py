from .convex import convex_hull_indices
from .gift_opening import gift_opening

__all__ = [
    'convex_hull_indices',
    'gift_opening',
]
