"""Enumerations and item records shared across the radar engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class UnknownEnumValue(ValueError):
    """Raised when a value outside a fixed enumeration reaches a lookup."""

    def __init__(self, kind: str, value: object):
        super().__init__(f"unknown {kind}: {value!r}")
        self.kind = kind
        self.value = value


class Quadrant(Enum):
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"
    FOURTH = "fourth"

    @classmethod
    def parse(cls, text: str) -> "Quadrant":
        try:
            return cls(text.strip().lower())
        except (AttributeError, ValueError):
            raise UnknownEnumValue("quadrant", text) from None


class Assessment(Enum):
    ADOPT = "adopt"
    TRIAL = "trial"
    ASSESS = "assess"
    HOLD = "hold"

    @classmethod
    def parse(cls, text: str) -> "Assessment":
        try:
            return cls(text.strip().lower())
        except (AttributeError, ValueError):
            raise UnknownEnumValue("assessment", text) from None


class Trend(Enum):
    UP = "up"
    DOWN = "down"
    KEEP = "keep"

    @classmethod
    def parse(cls, text: str) -> "Trend":
        try:
            return cls(text.strip().lower())
        except (AttributeError, ValueError):
            raise UnknownEnumValue("trend", text) from None


_QUADRANT_ORDER: Tuple[Quadrant, ...] = (
    Quadrant.SECOND,
    Quadrant.FIRST,
    Quadrant.THIRD,
    Quadrant.FOURTH,
)

_ASSESSMENT_ORDER: Tuple[Assessment, ...] = (
    Assessment.ADOPT,
    Assessment.TRIAL,
    Assessment.ASSESS,
    Assessment.HOLD,
)

_PREVIOUS_ASSESSMENT = {
    Assessment.ADOPT: Assessment.HOLD,
    Assessment.TRIAL: Assessment.ADOPT,
    Assessment.ASSESS: Assessment.TRIAL,
    Assessment.HOLD: Assessment.ASSESS,
}


def require_quadrant(value: object) -> Quadrant:
    if not isinstance(value, Quadrant):
        raise UnknownEnumValue("quadrant", value)
    return value


def require_assessment(value: object) -> Assessment:
    if not isinstance(value, Assessment):
        raise UnknownEnumValue("assessment", value)
    return value


def ordered_quadrants() -> Tuple[Quadrant, ...]:
    """Return quadrants in legend/index visitation order (2nd, 1st, 3rd, 4th)."""

    return _QUADRANT_ORDER


def assessments() -> Tuple[Assessment, ...]:
    return _ASSESSMENT_ORDER


def quadrant_as_string(quadrant: Quadrant) -> str:
    return require_quadrant(quadrant).name.capitalize()


def assessment_as_string(assessment: Assessment) -> str:
    return require_assessment(assessment).name.capitalize()


def is_more_practical(left: Assessment, right: Assessment) -> bool:
    """Return ``True`` when ``left`` sits on an inner ring relative to ``right``."""

    return _ASSESSMENT_ORDER.index(require_assessment(left)) < _ASSESSMENT_ORDER.index(
        require_assessment(right)
    )


def previous_assessment_of(assessment: Assessment) -> Assessment:
    return _PREVIOUS_ASSESSMENT[require_assessment(assessment)]


@dataclass(frozen=True)
class Item:
    """A technology placed on the radar."""

    name: str
    active: bool
    assessment: Assessment
    quadrant: Quadrant
    move: Trend = Trend.KEEP


@dataclass(frozen=True)
class IndexedItem(Item):
    """``Item`` with the running label assigned during classification."""

    index: str = ""

    @classmethod
    def from_item(cls, item: Item, index: int) -> "IndexedItem":
        return cls(
            name=item.name,
            active=item.active,
            assessment=item.assessment,
            quadrant=item.quadrant,
            move=item.move,
            index=str(index),
        )


__all__ = [
    "UnknownEnumValue",
    "Quadrant",
    "Assessment",
    "Trend",
    "Item",
    "IndexedItem",
    "require_quadrant",
    "require_assessment",
    "ordered_quadrants",
    "assessments",
    "quadrant_as_string",
    "assessment_as_string",
    "is_more_practical",
    "previous_assessment_of",
]
