from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from .geometry import to_polar_array
from .layout import RadarLayout
from .quadrants import MINIMUM_RADIUS, quadrant_area, ring

BLIP_DIAMETER = 18.0
_EPS = 1e-9


@dataclass
class LayoutWarning:
    kind: str
    message: str
    indices: Tuple[str, ...] = field(default_factory=tuple)

    def __str__(self) -> str:  # pragma: no cover - trivial string formatting
        return self.message


def _containment_warnings(layout: RadarLayout, points: np.ndarray) -> List[LayoutWarning]:
    warnings: List[LayoutWarning] = []
    polars = to_polar_array(points)
    half = MINIMUM_RADIUS / 2
    for blip, (x, y), (radius, _) in zip(layout.blips, points, polars):
        area = quadrant_area(blip.quadrant)
        if np.sign(x) != area.factor_x or np.sign(y) != area.factor_y:
            warnings.append(
                LayoutWarning(
                    'outside_quadrant',
                    f'blip {blip.index} ({blip.name}) at ({x:.2f}, {y:.2f}) is outside quadrant '
                    f'{blip.quadrant.value}',
                    (blip.index,),
                )
            )
        band = ring(blip.assessment)
        if not (band.min + half - _EPS <= radius <= band.max + half + _EPS):
            warnings.append(
                LayoutWarning(
                    'outside_ring',
                    f'blip {blip.index} ({blip.name}) radius {radius:.2f} is outside ring '
                    f'{blip.assessment.value}',
                    (blip.index,),
                )
            )
    return warnings


def _overlap_warnings(layout: RadarLayout, points: np.ndarray) -> List[LayoutWarning]:
    if len(points) < 2:
        return []
    deltas = points[:, None, :] - points[None, :, :]
    distances = np.hypot(deltas[..., 0], deltas[..., 1])
    close_i, close_j = np.nonzero(np.triu(distances < BLIP_DIAMETER, k=1))
    warnings: List[LayoutWarning] = []
    for i, j in zip(close_i.tolist(), close_j.tolist()):
        a, b = layout.blips[i], layout.blips[j]
        warnings.append(
            LayoutWarning(
                'overlap',
                f'blips {a.index} ({a.name}) and {b.index} ({b.name}) overlap '
                f'(distance {distances[i, j]:.2f})',
                (a.index, b.index),
            )
        )
    return warnings


def check_layout(layout: RadarLayout) -> List[LayoutWarning]:
    """Report blips outside their segment and blips drawn on top of each other."""

    points = layout.points()
    return _containment_warnings(layout, points) + _overlap_warnings(layout, points)
