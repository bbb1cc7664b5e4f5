# -*- coding: utf-8 -*-
"""
Tunables of the hull tracer.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TraceConfig:
    """Growth factors and tolerances that bound the tracer's retries."""

    # Multiplier of the search radius when no candidate of a step is valid
    radius_growth: float = 2.0

    # Multiplier of the concavity between two trace attempts
    concavity_growth: float = 1.5

    # Concavity grown from when the requested concavity is below it
    min_concavity: float = 1.0

    # Relative to the bounding box diagonal of the cloud
    tolerance: float = 1e-9

    # Restricted attempts before falling back to the convex hull
    max_attempts: Optional[int] = None

    def __post_init__(self):
        if self.radius_growth <= 1:
            raise ValueError('radius_growth should be larger than 1.')
        if self.concavity_growth <= 1:
            raise ValueError('concavity_growth should be larger than 1.')
        if self.min_concavity <= 0:
            raise ValueError('min_concavity should be positive.')
        if self.tolerance < 0:
            raise ValueError('tolerance should not be negative.')
        if self.max_attempts is not None and self.max_attempts < 0:
            raise ValueError('max_attempts should not be negative.')


DEFAULT_CONFIG = TraceConfig()
