from dataclasses import dataclass
from typing import Generic

from typing_extensions import override

from rampart.ordering import Comparison, T, compare
from rampart.relation import Relation, classify


@dataclass(frozen=True)
class Interval(Generic[T]):
    """A closed interval ``[lesser, greater]`` over a totally ordered domain.

    Bounds are normalized on construction, so ``Interval(7, 3)`` and
    ``Interval(3, 7)`` are the same interval. Equal bounds make an empty
    interval: a single point with no duration.

    Example:
        >>> Interval(7, 3).to_pair()
        (3, 7)
        >>> Interval(2, 4).overlaps(Interval(3, 7))
        True
    """

    lesser: T
    greater: T

    def __post_init__(self) -> None:
        if compare(self.lesser, self.greater) is Comparison.GT:
            lesser, greater = self.greater, self.lesser
            object.__setattr__(self, "lesser", lesser)
            object.__setattr__(self, "greater", greater)

    @override
    def __str__(self) -> str:
        """Human-friendly string showing the range."""
        return f"Interval({self.lesser}→{self.greater})"

    def to_pair(self) -> tuple[T, T]:
        """Return ``(lesser, greater)``.

        The pair may be swapped relative to the values the interval was built
        from: ``Interval(a, b).to_pair() == (min(a, b), max(a, b))``.
        """
        return (self.lesser, self.greater)

    @property
    def is_empty(self) -> bool:
        return self.lesser == self.greater

    @property
    def non_empty(self) -> bool:
        return not self.is_empty

    def relates(self, that: "Interval[T]") -> Relation:
        """Return how this interval relates to ``that``.

        See `Relation` for the meaning of each result.
        """
        return classify(self, that)

    def is_before(self, that: "Interval[T]") -> bool:
        return self.relates(that) is Relation.BEFORE

    def meets(self, that: "Interval[T]") -> bool:
        return self.relates(that) is Relation.MEETS

    def overlaps(self, that: "Interval[T]") -> bool:
        return self.relates(that) is Relation.OVERLAPS

    def is_finished_by(self, that: "Interval[T]") -> bool:
        return self.relates(that) is Relation.FINISHED_BY

    def contains(self, that: "Interval[T]") -> bool:
        return self.relates(that) is Relation.CONTAINS

    def starts(self, that: "Interval[T]") -> bool:
        return self.relates(that) is Relation.STARTS

    def is_equal_to(self, that: "Interval[T]") -> bool:
        """Relation-based equality; ``==`` compares the dataclass fields."""
        return self.relates(that) is Relation.EQUAL

    def is_started_by(self, that: "Interval[T]") -> bool:
        return self.relates(that) is Relation.STARTED_BY

    def is_during(self, that: "Interval[T]") -> bool:
        return self.relates(that) is Relation.DURING

    def finishes(self, that: "Interval[T]") -> bool:
        return self.relates(that) is Relation.FINISHES

    def is_overlapped_by(self, that: "Interval[T]") -> bool:
        return self.relates(that) is Relation.OVERLAPPED_BY

    def is_met_by(self, that: "Interval[T]") -> bool:
        return self.relates(that) is Relation.MET_BY

    def is_after(self, that: "Interval[T]") -> bool:
        return self.relates(that) is Relation.AFTER
