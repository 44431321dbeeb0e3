"""Render configuration and the process-wide default."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from .model import Assessment, Item, Quadrant, UnknownEnumValue, require_assessment
from .random_source import DEFAULT_SEED


@dataclass
class Area:
    width: float = 1450.0
    height: float = 1000.0


@dataclass
class AssessmentColors:
    adopt: str = "#93c47d"
    trial: str = "#93d2c2"
    assess: str = "#fbdb84"
    hold: str = "#efafa9"

    def get(self, assessment: Assessment) -> str:
        return getattr(self, require_assessment(assessment).value)


@dataclass
class Colors:
    background: str = "#fff"
    backing_text: str = "#eee"
    grid: str = "#bbb"
    inactive: str = "#ddd"
    tech: AssessmentColors = field(default_factory=AssessmentColors)


@dataclass
class QuadrantNames:
    left_top: str = "Languages"
    right_top: str = "Frameworks"
    left_bottom: str = "Infrastructure"
    right_bottom: str = "Data Management"


_NAME_SLOTS = {
    Quadrant.FIRST: "right_top",
    Quadrant.SECOND: "left_top",
    Quadrant.THIRD: "left_bottom",
    Quadrant.FOURTH: "right_bottom",
}


@dataclass
class RadarConfig:
    title: str = "Technology Radar"
    names: QuadrantNames = field(default_factory=QuadrantNames)
    colors: Colors = field(default_factory=Colors)
    print_layout: bool = False
    area: Area = field(default_factory=Area)

    def color(self, item: Item) -> str:
        """Assessment colour for active items (or any item in print layout)."""

        if item.active or self.print_layout:
            return self.colors.tech.get(item.assessment)
        return self.colors.inactive

    def quadrant_title(self, quadrant: Quadrant) -> str:
        try:
            slot = _NAME_SLOTS[quadrant]
        except (KeyError, TypeError):
            raise UnknownEnumValue("quadrant", quadrant) from None
        return getattr(self.names, slot)

    def set_quadrant_title(self, quadrant: Quadrant, title: str) -> None:
        try:
            slot = _NAME_SLOTS[quadrant]
        except (KeyError, TypeError):
            raise UnknownEnumValue("quadrant", quadrant) from None
        setattr(self.names, slot, title)


@dataclass
class LayoutOptions:
    """``shared_random`` spreads a bucket's items by reusing one source per render."""

    shared_random: bool = False
    seed: int = DEFAULT_SEED


_DEFAULT_CONFIG = RadarConfig()


def get_default_config() -> RadarConfig:
    return copy.deepcopy(_DEFAULT_CONFIG)


def set_default_config(config: RadarConfig) -> None:
    global _DEFAULT_CONFIG
    _DEFAULT_CONFIG = copy.deepcopy(config)
