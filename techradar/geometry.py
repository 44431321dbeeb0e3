"""Polar/cartesian conversions and clamping helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .random_source import Range


@dataclass(frozen=True)
class Cartesian:
    x: float
    y: float


@dataclass(frozen=True)
class Polar:
    radius: float
    theta: float


@dataclass(frozen=True)
class Rect:
    left_top: Cartesian
    right_bottom: Cartesian


@dataclass(frozen=True)
class PolarRange:
    min: Polar
    max: Polar

    def min_radius(self, adjust: float = 0.0) -> float:
        return self.min.radius + adjust

    def max_radius(self, adjust: float = 0.0) -> float:
        return self.max.radius + adjust

    def radius_range(self) -> Range:
        return Range(min=self.min.radius, max=self.max.radius)

    def theta_range(self) -> Range:
        return Range(min=self.min.theta, max=self.max.theta)


def to_polar(point: Cartesian) -> Polar:
    return Polar(radius=math.hypot(point.x, point.y), theta=math.atan2(point.y, point.x))


def to_cartesian(polar: Polar) -> Cartesian:
    return Cartesian(x=polar.radius * math.cos(polar.theta), y=polar.radius * math.sin(polar.theta))


def clamp_to_range(rng: Range, value: float) -> float:
    """Clamp ``value`` into ``rng``; a reversed range is accepted."""

    low = min(rng.min, rng.max)
    high = max(rng.min, rng.max)
    return min(max(value, low), high)


def clamp_radius(polar: Polar, ring_min: float, ring_max: float) -> Polar:
    return Polar(radius=clamp_to_range(Range(ring_min, ring_max), polar.radius), theta=polar.theta)


def clamp_to_rect(point: Cartesian, rect: Rect) -> Cartesian:
    x = clamp_to_range(Range(rect.left_top.x, rect.right_bottom.x), point.x)
    y = clamp_to_range(Range(rect.left_top.y, rect.right_bottom.y), point.y)
    return Cartesian(x=x, y=y)


def to_polar_array(points: np.ndarray) -> np.ndarray:
    """Vectorised ``to_polar`` over an ``(n, 2)`` array of ``x, y`` rows."""

    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    radius = np.hypot(pts[:, 0], pts[:, 1])
    theta = np.arctan2(pts[:, 1], pts[:, 0])
    return np.column_stack((radius, theta))


def to_cartesian_array(polars: np.ndarray) -> np.ndarray:
    pol = np.asarray(polars, dtype=float).reshape(-1, 2)
    return np.column_stack((pol[:, 0] * np.cos(pol[:, 1]), pol[:, 0] * np.sin(pol[:, 1])))
