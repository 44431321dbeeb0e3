"""Legend anchors and per-bucket line offsets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from .classify import Classification
from .geometry import Cartesian
from .model import (
    Assessment,
    Quadrant,
    UnknownEnumValue,
    is_more_practical,
    previous_assessment_of,
    require_assessment,
)

LEFT_EDGE = -675.0
LEGEND_RIGHT_EDGE = 450.0
LEGEND_UPPER_TOP = -310.0
LEGEND_LOWER_TOP = 90.0

LINE_HEIGHT = 12
SECTION_GAP = 36
TITLE_RISE = 16
COLUMN_WIDTH = 120
QUADRANT_TITLE_RISE = 45

TITLE_OFFSET = Cartesian(x=LEFT_EDGE, y=-420.0)
FOOTER_OFFSET = Cartesian(x=LEFT_EDGE, y=420.0)

_LEGEND_OFFSETS: Dict[Quadrant, Cartesian] = {
    Quadrant.FIRST: Cartesian(x=LEGEND_RIGHT_EDGE, y=LEGEND_UPPER_TOP),
    Quadrant.SECOND: Cartesian(x=LEFT_EDGE, y=LEGEND_UPPER_TOP),
    Quadrant.THIRD: Cartesian(x=LEFT_EDGE, y=LEGEND_LOWER_TOP),
    Quadrant.FOURTH: Cartesian(x=LEGEND_RIGHT_EDGE, y=LEGEND_LOWER_TOP),
}


def quadrant_legend_offset(quadrant: Quadrant) -> Cartesian:
    try:
        return _LEGEND_OFFSETS[quadrant]
    except (KeyError, TypeError):
        raise UnknownEnumValue("quadrant", quadrant) from None


def quadrant_title_offset(quadrant: Quadrant) -> Cartesian:
    anchor = quadrant_legend_offset(quadrant)
    return Cartesian(x=anchor.x, y=anchor.y - QUADRANT_TITLE_RISE)


def legend_horizontal_offset(assessment: Assessment) -> int:
    """Adopt/Trial share the left column, Assess/Hold the right one."""

    return 0 if is_more_practical(assessment, Assessment.ASSESS) else COLUMN_WIDTH


@dataclass(frozen=True)
class LegendVerticalOffsetConfig:
    title: int
    length_at: Callable[[int], int]


def legend_vertical_offset(
    entries: Classification,
) -> Callable[[Quadrant, Assessment], LegendVerticalOffsetConfig]:
    """Return a lookup giving the title and line offsets of each bucket.

    The second section of a column (Trial, Hold) starts below the items of the
    first one (Adopt, Assess) of the same quadrant.
    """

    def offsets(quadrant: Quadrant, assessment: Assessment) -> LegendVerticalOffsetConfig:
        by_assessment = entries.get(quadrant)
        if require_assessment(assessment) in (Assessment.TRIAL, Assessment.HOLD):
            preceding = len(by_assessment.get(previous_assessment_of(assessment)))
            return LegendVerticalOffsetConfig(
                title=SECTION_GAP + preceding * LINE_HEIGHT - TITLE_RISE,
                length_at=lambda index: SECTION_GAP + (preceding + index) * LINE_HEIGHT,
            )
        return LegendVerticalOffsetConfig(
            title=-TITLE_RISE,
            length_at=lambda index: index * LINE_HEIGHT,
        )

    return offsets


def legend_position(quadrant: Quadrant, assessment: Assessment, vertical: int) -> Cartesian:
    anchor = quadrant_legend_offset(quadrant)
    return Cartesian(x=anchor.x + legend_horizontal_offset(assessment), y=anchor.y + vertical)
