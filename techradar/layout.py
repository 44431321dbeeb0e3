"""Full radar layout: everything an external renderer needs to draw."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

import numpy as np

from .classify import Classification, classify
from .config import LayoutOptions, RadarConfig, get_default_config
from .geometry import Cartesian
from .legend import (
    FOOTER_OFFSET,
    TITLE_OFFSET,
    legend_position,
    legend_vertical_offset,
    quadrant_title_offset,
)
from .logging_utils import apply_debug_logging
from .model import IndexedItem, Item, Quadrant, Assessment, Trend, assessment_as_string, assessments
from .placement import place
from .quadrants import ring, ring_radii
from .random_source import PseudoRandomSource

logger = logging.getLogger(__name__)

FOOTER_TEXT = "▲ moved up     ▼ moved down"
RING_LABEL_DROP = 62.0

MARKERS = {
    Trend.UP: "triangle-up",
    Trend.DOWN: "triangle-down",
    Trend.KEEP: "circle",
}


@dataclass(frozen=True)
class TextAnchor:
    text: str
    position: Cartesian


@dataclass(frozen=True)
class Blip:
    index: str
    name: str
    quadrant: Quadrant
    assessment: Assessment
    point: Cartesian
    color: str
    marker: str
    show_label: bool


@dataclass(frozen=True)
class LegendEntry:
    index: str
    name: str
    position: Cartesian


@dataclass(frozen=True)
class LegendSection:
    quadrant: Quadrant
    assessment: Assessment
    title: TextAnchor
    count: int
    entries: Tuple[LegendEntry, ...]


@dataclass(frozen=True)
class RadarLayout:
    origin: Cartesian
    title: TextAnchor
    footer: TextAnchor
    quadrant_titles: Tuple[TextAnchor, ...]
    rings: Tuple[float, ...]
    ring_labels: Tuple[TextAnchor, ...]
    blips: Tuple[Blip, ...]
    legend: Tuple[LegendSection, ...]

    def points(self) -> np.ndarray:
        """Blip centres as an ``(n, 2)`` array in blip order."""

        if not self.blips:
            return np.zeros((0, 2), dtype=float)
        return np.array([(blip.point.x, blip.point.y) for blip in self.blips], dtype=float)

    def section(self, quadrant: Quadrant, assessment: Assessment) -> LegendSection:
        for section in self.legend:
            if section.quadrant is quadrant and section.assessment is assessment:
                return section
        raise KeyError((quadrant, assessment))

    def as_dict(self) -> Dict[str, Any]:
        return _jsonable(asdict(self))


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _jsonable(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(val) for val in value]
    return value


def _blips(
    entries: Classification[IndexedItem], config: RadarConfig, options: LayoutOptions
) -> List[Blip]:
    shared = PseudoRandomSource(options.seed) if options.shared_random else None
    blips: List[Blip] = []
    for entry in entries.entries():
        item = entry.item
        source = shared if shared is not None else PseudoRandomSource(options.seed)
        blips.append(
            Blip(
                index=item.index,
                name=item.name,
                quadrant=item.quadrant,
                assessment=item.assessment,
                point=place(item.quadrant, item.assessment, source),
                color=config.color(item),
                marker=MARKERS[item.move],
                show_label=item.active or config.print_layout,
            )
        )
    return blips


def _legend(entries: Classification[IndexedItem]) -> List[LegendSection]:
    vertical = legend_vertical_offset(entries)
    sections: List[LegendSection] = []
    for quadrant, by_assessment in entries.quadrants():
        for assessment, bucket in by_assessment.buckets():
            offsets = vertical(quadrant, assessment)
            sections.append(
                LegendSection(
                    quadrant=quadrant,
                    assessment=assessment,
                    title=TextAnchor(
                        text=assessment_as_string(assessment),
                        position=legend_position(quadrant, assessment, offsets.title),
                    ),
                    count=len(bucket),
                    entries=tuple(
                        LegendEntry(
                            index=item.index,
                            name=item.name,
                            position=legend_position(quadrant, assessment, offsets.length_at(i)),
                        )
                        for i, item in enumerate(bucket)
                    ),
                )
            )
    return sections


def _ring_labels(config: RadarConfig) -> List[TextAnchor]:
    if not config.print_layout:
        return []
    return [
        TextAnchor(
            text=assessment_as_string(assessment),
            position=Cartesian(x=0.0, y=-ring(assessment).max + RING_LABEL_DROP),
        )
        for assessment in assessments()
    ]


def layout_radar(
    items: Iterable[Item],
    config: Optional[RadarConfig] = None,
    options: Optional[LayoutOptions] = None,
) -> RadarLayout:
    """Classify ``items`` and compute every position the renderer draws."""

    config = config or get_default_config()
    options = options or LayoutOptions()
    entries = classify(items)

    blips = _blips(entries, config, options)
    logger.info(
        "Placed %d blip(s) with %s random source",
        len(blips),
        "shared" if options.shared_random else "per-item",
    )

    quadrant_titles = tuple(
        TextAnchor(text=config.quadrant_title(quadrant), position=quadrant_title_offset(quadrant))
        for quadrant, _ in entries.quadrants()
    )
    return RadarLayout(
        origin=Cartesian(x=config.area.width / 2, y=config.area.height / 2),
        title=TextAnchor(text=config.title, position=TITLE_OFFSET),
        footer=TextAnchor(text=FOOTER_TEXT, position=FOOTER_OFFSET),
        quadrant_titles=quadrant_titles,
        rings=ring_radii(),
        ring_labels=tuple(_ring_labels(config)),
        blips=tuple(blips),
        legend=tuple(_legend(entries)),
    )


apply_debug_logging(globals(), logger=logger, skip={"_jsonable"})
