"""Grouping of items into quadrant/assessment buckets and index assignment."""

from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass, replace
from typing import Dict, Generic, Iterable, Iterator, List, Tuple, TypeVar

from .model import (
    Assessment,
    IndexedItem,
    Item,
    Quadrant,
    assessments,
    ordered_quadrants,
    require_assessment,
    require_quadrant,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Item)


def collation_key(name: str) -> Tuple[str, str, str]:
    """Sort key approximating locale collation.

    Base letters compare first ignoring case and accents, then accents, then
    case with lowercase ahead of uppercase.
    """

    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return base.casefold(), decomposed.casefold(), name.swapcase()


@dataclass(frozen=True)
class ByAssessment(Generic[T]):
    adopt: Tuple[T, ...] = ()
    trial: Tuple[T, ...] = ()
    assess: Tuple[T, ...] = ()
    hold: Tuple[T, ...] = ()

    def get(self, assessment: Assessment) -> Tuple[T, ...]:
        return getattr(self, require_assessment(assessment).value)

    def with_item(self, item: T) -> "ByAssessment[T]":
        key = require_assessment(item.assessment).value
        return replace(self, **{key: getattr(self, key) + (item,)})

    def buckets(self) -> Iterator[Tuple[Assessment, Tuple[T, ...]]]:
        for assessment in assessments():
            yield assessment, self.get(assessment)

    def __len__(self) -> int:
        return sum(len(bucket) for _, bucket in self.buckets())


@dataclass(frozen=True)
class ClassifiedEntry(Generic[T]):
    item: T
    all_index: int
    index_in_quadrant: int
    index_in_assessment: int


@dataclass(frozen=True)
class Classification(Generic[T]):
    first: ByAssessment[T] = ByAssessment()
    second: ByAssessment[T] = ByAssessment()
    third: ByAssessment[T] = ByAssessment()
    fourth: ByAssessment[T] = ByAssessment()

    def get(self, quadrant: Quadrant) -> ByAssessment[T]:
        return getattr(self, require_quadrant(quadrant).value)

    def bucket(self, quadrant: Quadrant, assessment: Assessment) -> Tuple[T, ...]:
        return self.get(quadrant).get(assessment)

    def with_item(self, item: T) -> "Classification[T]":
        key = require_quadrant(item.quadrant).value
        return replace(self, **{key: getattr(self, key).with_item(item)})

    def quadrants(self) -> Iterator[Tuple[Quadrant, ByAssessment[T]]]:
        for quadrant in ordered_quadrants():
            yield quadrant, self.get(quadrant)

    def entries(self) -> Iterator[ClassifiedEntry[T]]:
        """Visit every item in index order with its running positions."""

        all_index = 0
        for _, by_assessment in self.quadrants():
            index_in_quadrant = 0
            for _, bucket in by_assessment.buckets():
                for index_in_assessment, item in enumerate(bucket):
                    yield ClassifiedEntry(item, all_index, index_in_quadrant, index_in_assessment)
                    all_index += 1
                    index_in_quadrant += 1

    def items(self) -> List[T]:
        return [entry.item for entry in self.entries()]

    def counts(self) -> Dict[Tuple[Quadrant, Assessment], int]:
        return {
            (quadrant, assessment): len(bucket)
            for quadrant, by_assessment in self.quadrants()
            for assessment, bucket in by_assessment.buckets()
        }

    def __len__(self) -> int:
        return sum(len(by_assessment) for _, by_assessment in self.quadrants())


def group(items: Iterable[Item]) -> Classification[Item]:
    """Partition ``items`` by quadrant then assessment, keeping input order."""

    classification: Classification[Item] = Classification()
    for item in items:
        classification = classification.with_item(item)
    return classification


def _sort_and_give_index(previous: int, items: Tuple[Item, ...]) -> Tuple[int, Tuple[IndexedItem, ...]]:
    ordered = sorted(items, key=lambda item: collation_key(item.name))
    indexed = tuple(
        IndexedItem.from_item(item, previous + offset) for offset, item in enumerate(ordered, start=1)
    )
    return previous + len(indexed), indexed


def _sort_by_name(
    previous: int, by_assessment: ByAssessment[Item]
) -> Tuple[int, ByAssessment[IndexedItem]]:
    counter = previous
    sorted_buckets: Dict[str, Tuple[IndexedItem, ...]] = {}
    for assessment, bucket in by_assessment.buckets():
        counter, sorted_buckets[assessment.value] = _sort_and_give_index(counter, bucket)
    return counter, ByAssessment(**sorted_buckets)


def sort_by_name_giving_index(classification: Classification[Item]) -> Classification[IndexedItem]:
    """Sort every bucket by name and hand out indices starting at 1."""

    counter = 0
    sorted_quadrants: Dict[str, ByAssessment[IndexedItem]] = {}
    for quadrant, by_assessment in classification.quadrants():
        counter, sorted_quadrants[quadrant.value] = _sort_by_name(counter, by_assessment)
    logger.debug("Assigned indices 1..%d", counter)
    return Classification(**sorted_quadrants)


def classify(items: Iterable[Item]) -> Classification[IndexedItem]:
    classification = sort_by_name_giving_index(group(items))
    logger.info("Classified %d item(s)", len(classification))
    return classification
