import itertools
import math

import pytest

from techradar.geometry import Cartesian, to_polar
from techradar.model import Assessment, Quadrant, UnknownEnumValue
from techradar.placement import Segment, place
from techradar.quadrants import DRAWING_AREA_HALF_WIDTH, MINIMUM_RADIUS, quadrant_area, ring
from techradar.random_source import PseudoRandomSource

COMBINATIONS = list(itertools.product(Quadrant, Assessment))


def _assert_contained(point: Cartesian, quadrant: Quadrant, assessment: Assessment) -> None:
    area = quadrant_area(quadrant)
    band = ring(assessment)
    radius = to_polar(point).radius

    assert band.min + MINIMUM_RADIUS / 2 - 1e-9 <= radius <= band.max + MINIMUM_RADIUS / 2 + 1e-9
    assert math.copysign(1, point.x) == area.factor_x and point.x != 0
    assert math.copysign(1, point.y) == area.factor_y and point.y != 0
    assert abs(point.x) <= DRAWING_AREA_HALF_WIDTH
    assert abs(point.y) <= DRAWING_AREA_HALF_WIDTH


@pytest.mark.parametrize('quadrant, assessment', COMBINATIONS)
def test_shared_source_points_stay_in_segment(quadrant, assessment):
    source = PseudoRandomSource()
    for _ in range(1000):
        _assert_contained(place(quadrant, assessment, source), quadrant, assessment)


@pytest.mark.parametrize('quadrant, assessment', COMBINATIONS)
def test_fresh_source_points_stay_in_segment(quadrant, assessment):
    _assert_contained(place(quadrant, assessment), quadrant, assessment)


def test_fresh_source_per_call_repeats_the_same_point():
    # Without a shared source every item of a bucket is drawn from seed 42.
    first = place(Quadrant.SECOND, Assessment.TRIAL)
    second = place(Quadrant.SECOND, Assessment.TRIAL)

    assert first == second
    assert first == place(Quadrant.SECOND, Assessment.TRIAL, PseudoRandomSource(42))


def test_shared_source_spreads_points():
    source = PseudoRandomSource()
    points = {place(Quadrant.FIRST, Assessment.ADOPT, source) for _ in range(20)}

    assert len(points) == 20


def test_random_draws_radius_then_theta():
    segment = Segment(Quadrant.FOURTH, Assessment.ASSESS)
    probe = PseudoRandomSource()
    r1, r2, t = probe.random(), probe.random(), probe.random()
    expected_radius = 220.0 + r1 * r2 * 0.5 * 90.0
    expected_theta = t * 0.5 * math.pi

    polar = to_polar(segment.random(PseudoRandomSource()))

    assert polar.radius == pytest.approx(expected_radius)
    assert polar.theta == pytest.approx(expected_theta)


def test_clip_pulls_point_off_axis_and_into_ring():
    segment = Segment(Quadrant.FIRST, Assessment.ADOPT)

    clipped = segment.clip(Cartesian(500.0, 3.0))

    assert clipped.y < 0
    assert to_polar(clipped).radius == pytest.approx(130.0 + MINIMUM_RADIUS / 2)


def test_ring_bounds_are_shifted_by_half_minimum_radius():
    assert Segment(Quadrant.THIRD, Assessment.HOLD).ring_bounds() == (325.0, 415.0)


def test_unknown_quadrant_is_rejected():
    with pytest.raises(UnknownEnumValue) as exc:
        place('fifth', Assessment.ADOPT)
    assert 'fifth' in str(exc.value)
