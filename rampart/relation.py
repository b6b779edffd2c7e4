"""Allen's interval relations and the classifier that picks one of them.

Inspired by James F. Allen's report, *Maintaining Knowledge About Temporal
Intervals* (https://hdl.handle.net/1802/10574), and using its terminology.
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

from rampart.ordering import Comparison, compare

if TYPE_CHECKING:
    from rampart.interval import Interval

logger = logging.getLogger(__name__)


class Relation(Enum):
    """How interval ``x`` relates to interval ``y``.

    The 13 members are mutually exclusive and exhaustive: for any two
    intervals exactly one holds. Use `classify` (or ``x.relates(y)``) to
    find it.

    ============== ==============================================
    BEFORE         ``x.greater < y.lesser``
    MEETS          ``x.greater == y.lesser``, x non-empty
    OVERLAPS       x starts first and ends inside y
    FINISHED_BY    x starts first, both end together, y non-empty
    CONTAINS       x starts first and ends last
    STARTS         both start together, x ends first, x non-empty
    EQUAL          same bounds
    STARTED_BY     both start together, x ends last, y non-empty
    DURING         y starts first and ends last
    FINISHES       y starts first, both end together, x non-empty
    OVERLAPPED_BY  y starts first and ends inside x
    MET_BY         ``x.lesser == y.greater``, y non-empty
    AFTER          ``x.lesser > y.greater``
    ============== ==============================================
    """

    BEFORE = "before"
    MEETS = "meets"
    OVERLAPS = "overlaps"
    FINISHED_BY = "finished_by"
    CONTAINS = "contains"
    STARTS = "starts"
    EQUAL = "equal"
    STARTED_BY = "started_by"
    DURING = "during"
    FINISHES = "finishes"
    OVERLAPPED_BY = "overlapped_by"
    MET_BY = "met_by"
    AFTER = "after"

    @property
    def inverted(self) -> "Relation":
        """The relation of ``y`` to ``x`` when this is the relation of ``x`` to ``y``.

        Inverting twice returns the original relation, and
        ``classify(x, y).inverted is classify(y, x)``.
        """
        return _INVERSES[self]

    def __invert__(self) -> "Relation":
        return self.inverted

    @classmethod
    def from_intervals(cls, x: "Interval[Any]", y: "Interval[Any]") -> "Relation":
        """Alias for `classify`."""
        return classify(x, y)


_INVERSES: dict[Relation, Relation] = {
    Relation.BEFORE: Relation.AFTER,
    Relation.AFTER: Relation.BEFORE,
    Relation.MEETS: Relation.MET_BY,
    Relation.MET_BY: Relation.MEETS,
    Relation.OVERLAPS: Relation.OVERLAPPED_BY,
    Relation.OVERLAPPED_BY: Relation.OVERLAPS,
    Relation.FINISHED_BY: Relation.FINISHES,
    Relation.FINISHES: Relation.FINISHED_BY,
    Relation.CONTAINS: Relation.DURING,
    Relation.DURING: Relation.CONTAINS,
    Relation.STARTS: Relation.STARTED_BY,
    Relation.STARTED_BY: Relation.STARTS,
    Relation.EQUAL: Relation.EQUAL,
}


def classify(x: "Interval[Any]", y: "Interval[Any]") -> Relation:
    """Determine the relation between interval ``x`` and interval ``y``.

    Algorithm: compare the four endpoint pairs and match the resulting
    quadruple against an ordered decision table. The first matching row
    wins; several rows overlap, and their order decides how empty (point)
    intervals sharing an endpoint are classified.

    Example:
        >>> classify(Interval(2, 4), Interval(3, 7))
        <Relation.OVERLAPS: 'overlaps'>
        >>> classify(Interval(3, 3), Interval(3, 7))  # not STARTS or MEETS
        <Relation.OVERLAPS: 'overlaps'>

    Raises:
        TypeError: If either argument is not an Interval, or the bounds of
            the two intervals cannot be ordered against each other
    """
    # Import at runtime to avoid circular dependency
    from rampart.interval import Interval

    for name, value in (("x", x), ("y", y)):
        if not isinstance(value, Interval):
            raise TypeError(
                f"classify() expects two Interval arguments.\n"
                f"Got {name}={type(value).__name__!r}: {value!r}\n"
                f"Hint: Wrap raw bounds first: classify(Interval(1, 2), Interval(3, 7))"
            )

    ll = compare(x.lesser, y.lesser)
    lg = compare(x.lesser, y.greater)
    gl = compare(x.greater, y.lesser)
    gg = compare(x.greater, y.greater)

    result = _decide(ll, lg, gl, gg)
    logger.debug(
        "classified %s against %s as %s (ll=%s lg=%s gl=%s gg=%s)",
        x,
        y,
        result.name,
        ll.name,
        lg.name,
        gl.name,
        gg.name,
    )
    return result


def _decide(
    ll: Comparison, lg: Comparison, gl: Comparison, gg: Comparison
) -> Relation:
    """First-match decision table; row order is significant."""
    match (ll, lg, gl, gg):
        case (Comparison.EQ, _, _, Comparison.EQ):
            return Relation.EQUAL
        case (_, _, Comparison.LT, _):
            return Relation.BEFORE
        case (Comparison.LT, _, Comparison.EQ, Comparison.LT):
            return Relation.MEETS
        case (_, _, Comparison.EQ, _):
            return Relation.OVERLAPS
        case (Comparison.GT, Comparison.EQ, _, Comparison.GT):
            return Relation.MET_BY
        case (_, Comparison.EQ, _, _):
            return Relation.OVERLAPPED_BY
        case (_, Comparison.GT, _, _):
            return Relation.AFTER
        case (Comparison.LT, _, _, Comparison.LT):
            return Relation.OVERLAPS
        case (Comparison.LT, _, _, Comparison.EQ):
            return Relation.FINISHED_BY
        case (Comparison.LT, _, _, Comparison.GT):
            return Relation.CONTAINS
        case (Comparison.EQ, _, _, Comparison.LT):
            return Relation.STARTS
        case (Comparison.EQ, _, _, Comparison.GT):
            return Relation.STARTED_BY
        case (Comparison.GT, _, _, Comparison.LT):
            return Relation.DURING
        case (Comparison.GT, _, _, Comparison.EQ):
            return Relation.FINISHES
        case (Comparison.GT, _, _, Comparison.GT):
            return Relation.OVERLAPPED_BY
