import pytest

from techradar.classify import classify
from techradar.legend import (
    legend_horizontal_offset,
    legend_position,
    legend_vertical_offset,
    quadrant_legend_offset,
    quadrant_title_offset,
)
from techradar.model import Assessment, Item, Quadrant, UnknownEnumValue


def _entries(adopt=0, assess=0, quadrant=Quadrant.FIRST):
    items = [Item(f'a{i}', True, Assessment.ADOPT, quadrant) for i in range(adopt)]
    items += [Item(f's{i}', True, Assessment.ASSESS, quadrant) for i in range(assess)]
    return classify(items)


def test_first_section_stacks_from_zero():
    offsets = legend_vertical_offset(_entries(adopt=3))(Quadrant.FIRST, Assessment.ADOPT)

    assert offsets.title == -16
    assert offsets.length_at(0) == 0
    assert offsets.length_at(2) == 24


def test_second_section_starts_after_preceding_bucket():
    offsets = legend_vertical_offset(_entries(adopt=3))(Quadrant.FIRST, Assessment.TRIAL)

    assert offsets.length_at(0) == 72
    assert offsets.title == 56
    assert offsets.length_at(1) == 84


def test_hold_follows_assess_of_the_same_quadrant():
    vertical = legend_vertical_offset(_entries(adopt=5, assess=2))

    assert vertical(Quadrant.FIRST, Assessment.HOLD).length_at(0) == 36 + 2 * 12
    # Other quadrants are empty, so their second sections sit right below the gap.
    assert vertical(Quadrant.THIRD, Assessment.HOLD).length_at(0) == 36
    assert vertical(Quadrant.THIRD, Assessment.TRIAL).title == 20


@pytest.mark.parametrize(
    'assessment, expected',
    [
        (Assessment.ADOPT, 0),
        (Assessment.TRIAL, 0),
        (Assessment.ASSESS, 120),
        (Assessment.HOLD, 120),
    ],
)
def test_horizontal_columns(assessment, expected):
    assert legend_horizontal_offset(assessment) == expected


def test_quadrant_anchors():
    assert (quadrant_legend_offset(Quadrant.FIRST).x, quadrant_legend_offset(Quadrant.FIRST).y) == (450, -310)
    assert (quadrant_legend_offset(Quadrant.THIRD).x, quadrant_legend_offset(Quadrant.THIRD).y) == (-675, 90)
    assert quadrant_title_offset(Quadrant.SECOND).y == -355


def test_legend_position_combines_anchor_and_offsets():
    position = legend_position(Quadrant.FOURTH, Assessment.HOLD, 48)

    assert (position.x, position.y) == (570, 138)


def test_unknown_assessment_is_rejected():
    vertical = legend_vertical_offset(_entries())

    with pytest.raises(UnknownEnumValue):
        vertical(Quadrant.FIRST, 'later')
    with pytest.raises(UnknownEnumValue):
        quadrant_legend_offset(None)
