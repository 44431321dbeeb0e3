"""Blip placement inside a quadrant/ring segment."""

from __future__ import annotations

import logging
from typing import Optional

from .geometry import (
    Cartesian,
    Polar,
    PolarRange,
    Rect,
    clamp_radius,
    clamp_to_rect,
    to_cartesian,
    to_polar,
)
from .logging_utils import apply_debug_logging
from .model import Assessment, Quadrant
from .quadrants import MINIMUM_RADIUS, polar_range, quadrant_rect
from .random_source import PseudoRandomSource

logger = logging.getLogger(__name__)


class Segment:
    """Angular/radial region where items of one (quadrant, assessment) live."""

    def __init__(self, quadrant: Quadrant, assessment: Assessment):
        self.quadrant = quadrant
        self.assessment = assessment
        self.polar_range: PolarRange = polar_range(quadrant, assessment)
        self.rect: Rect = quadrant_rect(quadrant)

    def ring_bounds(self) -> tuple[float, float]:
        adjust = MINIMUM_RADIUS / 2
        return (
            self.polar_range.min_radius(adjust=adjust),
            self.polar_range.max_radius(adjust=adjust),
        )

    def random(self, source: PseudoRandomSource) -> Cartesian:
        # Radius is drawn before theta; reordering changes every layout.
        radius = source.normal_between(self.polar_range.radius_range())
        theta = source.random_between(self.polar_range.theta_range())
        return to_cartesian(Polar(radius=radius, theta=theta))

    def clip(self, point: Cartesian) -> Cartesian:
        bounded = clamp_to_rect(point, self.rect)
        ring_min, ring_max = self.ring_bounds()
        return to_cartesian(clamp_radius(to_polar(bounded), ring_min, ring_max))


def place(
    quadrant: Quadrant,
    assessment: Assessment,
    source: Optional[PseudoRandomSource] = None,
) -> Cartesian:
    """Return a jittered point for an item of ``quadrant``/``assessment``.

    Without ``source`` a freshly seeded generator is used, so every call for the
    same bucket returns the same point. Pass one shared source per render to
    spread the items of a bucket apart.
    """

    segment = Segment(quadrant, assessment)
    if source is None:
        source = PseudoRandomSource()
    return segment.clip(segment.random(source))


apply_debug_logging(globals(), logger=logger)
