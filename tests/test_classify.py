from collections import Counter
import itertools

import pytest

from techradar.classify import Classification, classify, collation_key, group
from techradar.model import Assessment, Item, Quadrant, UnknownEnumValue


def item(name, quadrant, assessment, active=True):
    return Item(name=name, active=active, assessment=assessment, quadrant=quadrant)


def _sample_items():
    names = ['Zig', 'kotlin', 'Ada', 'Go', 'elm', 'Scala', 'Rust', 'C', 'Dart', 'Lua']
    combos = itertools.cycle(itertools.product(Quadrant, Assessment))
    return [item(name, q, a) for name, (q, a) in zip(names * 4, combos)]


def test_kotlin_before_rust_scenario():
    entries = classify(
        [
            item('Rust', Quadrant.SECOND, Assessment.TRIAL),
            item('Kotlin', Quadrant.SECOND, Assessment.ADOPT),
        ]
    )

    indices = {it.name: it.index for it in entries.items()}
    assert indices == {'Kotlin': '1', 'Rust': '2'}


def test_quadrant_and_assessment_visit_order():
    entries = classify(
        [
            item('a', Quadrant.FOURTH, Assessment.ADOPT),
            item('b', Quadrant.THIRD, Assessment.ADOPT),
            item('c', Quadrant.FIRST, Assessment.HOLD),
            item('d', Quadrant.FIRST, Assessment.ADOPT),
            item('e', Quadrant.SECOND, Assessment.HOLD),
        ]
    )

    assert [(it.name, it.index) for it in entries.items()] == [
        ('e', '1'),
        ('d', '2'),
        ('c', '3'),
        ('b', '4'),
        ('a', '5'),
    ]


def test_partition_and_index_contiguity():
    items = _sample_items()
    entries = classify(items)
    classified = entries.items()

    key = lambda it: (it.name, it.quadrant, it.assessment, it.active)
    assert Counter(map(key, classified)) == Counter(map(key, items))
    assert sorted(int(it.index) for it in classified) == list(range(1, len(items) + 1))
    for (quadrant, assessment), count in entries.counts().items():
        expected = sum(1 for it in items if it.quadrant is quadrant and it.assessment is assessment)
        assert count == expected


def test_reclassifying_gives_identical_indices():
    items = _sample_items()

    assert classify(items) == classify(items)


def test_empty_input_gives_empty_quadrants():
    entries = classify([])

    assert len(entries) == 0
    assert entries == Classification()
    assert list(entries.entries()) == []


def test_duplicate_names_keep_input_order():
    first = item('Go', Quadrant.THIRD, Assessment.TRIAL, active=True)
    second = item('Go', Quadrant.THIRD, Assessment.TRIAL, active=False)

    bucket = classify([first, second]).bucket(Quadrant.THIRD, Assessment.TRIAL)

    assert [(it.active, it.index) for it in bucket] == [(True, '1'), (False, '2')]


def test_group_preserves_input_order_before_sorting():
    items = [item('b', Quadrant.FIRST, Assessment.ADOPT), item('a', Quadrant.FIRST, Assessment.ADOPT)]

    assert group(items).bucket(Quadrant.FIRST, Assessment.ADOPT) == tuple(items)


def test_collation_ignores_case_and_accents_first():
    names = ['banana', 'Éclair', 'Apple', 'eagle', 'apple', 'cherry']

    assert sorted(names, key=collation_key) == ['apple', 'Apple', 'banana', 'cherry', 'eagle', 'Éclair']


def test_entries_report_positions():
    entries = classify(
        [
            item('x', Quadrant.FIRST, Assessment.TRIAL),
            item('y', Quadrant.FIRST, Assessment.TRIAL),
            item('z', Quadrant.SECOND, Assessment.ADOPT),
        ]
    )

    positions = [
        (e.item.name, e.all_index, e.index_in_quadrant, e.index_in_assessment) for e in entries.entries()
    ]
    assert positions == [('z', 0, 0, 0), ('x', 1, 0, 0), ('y', 2, 1, 1)]


def test_unknown_quadrant_value_is_rejected():
    bad = Item(name='Bad', active=True, assessment=Assessment.ADOPT, quadrant='fifth')

    with pytest.raises(UnknownEnumValue) as exc:
        classify([bad])
    assert 'fifth' in str(exc.value)
