"""Static quadrant and ring tables.

Coordinates are in screen space: the origin is the radar centre and ``y``
grows downward, so the right-top quadrant has ``factor_y == -1``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Tuple

from .geometry import Cartesian, Polar, PolarRange, Rect
from .model import Assessment, Quadrant, UnknownEnumValue, assessments
from .random_source import Range

MINIMUM_RADIUS = 30.0
DRAWING_AREA_HALF_WIDTH = 400.0


@dataclass(frozen=True)
class QuadrantArea:
    min_radial: float  # units of pi
    max_radial: float
    factor_x: int
    factor_y: int

    def theta_range(self) -> Range:
        return Range(min=self.min_radial * math.pi, max=self.max_radial * math.pi)


QUADRANT_AREAS: Dict[Quadrant, QuadrantArea] = {
    Quadrant.FIRST: QuadrantArea(min_radial=-0.5, max_radial=0.0, factor_x=1, factor_y=-1),
    Quadrant.SECOND: QuadrantArea(min_radial=-1.0, max_radial=-0.5, factor_x=-1, factor_y=-1),
    Quadrant.THIRD: QuadrantArea(min_radial=0.5, max_radial=1.0, factor_x=-1, factor_y=1),
    Quadrant.FOURTH: QuadrantArea(min_radial=0.0, max_radial=0.5, factor_x=1, factor_y=1),
}

RINGS: Dict[Assessment, Range] = {
    Assessment.ADOPT: Range(min=MINIMUM_RADIUS, max=130.0),
    Assessment.TRIAL: Range(min=130.0, max=220.0),
    Assessment.ASSESS: Range(min=220.0, max=310.0),
    Assessment.HOLD: Range(min=310.0, max=DRAWING_AREA_HALF_WIDTH),
}


def quadrant_area(quadrant: Quadrant) -> QuadrantArea:
    try:
        return QUADRANT_AREAS[quadrant]
    except (KeyError, TypeError):
        raise UnknownEnumValue("quadrant", quadrant) from None


def ring(assessment: Assessment) -> Range:
    try:
        return RINGS[assessment]
    except (KeyError, TypeError):
        raise UnknownEnumValue("assessment", assessment) from None


def ring_radii() -> Tuple[float, ...]:
    """Outer radius of every ring, innermost first."""

    return tuple(ring(assessment).max for assessment in assessments())


def polar_range(quadrant: Quadrant, assessment: Assessment) -> PolarRange:
    band = ring(assessment)
    theta = quadrant_area(quadrant).theta_range()
    return PolarRange(
        min=Polar(radius=band.min, theta=theta.min),
        max=Polar(radius=band.max, theta=theta.max),
    )


def quadrant_rect(quadrant: Quadrant) -> Rect:
    """Quadrant bounding box, inset from both axes by half the minimum radius."""

    area = quadrant_area(quadrant)
    return Rect(
        left_top=Cartesian(
            x=MINIMUM_RADIUS * area.factor_x / 2,
            y=MINIMUM_RADIUS * area.factor_y / 2,
        ),
        right_bottom=Cartesian(
            x=DRAWING_AREA_HALF_WIDTH * area.factor_x,
            y=DRAWING_AREA_HALF_WIDTH * area.factor_y,
        ),
    )
