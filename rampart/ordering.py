"""Three-way comparison over Python's rich comparison protocol.

Interval bounds only need to support ``<`` (and ``==`` for emptiness checks).
Custom orderings can be supplied by wrapping values with
``functools.cmp_to_key``.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Protocol, TypeVar


class Comparable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=Comparable)


class Comparison(Enum):
    LT = -1
    EQ = 0
    GT = 1


def compare(a: Any, b: Any) -> Comparison:
    """Compare two values of a totally ordered domain.

    Raises:
        TypeError: If the values cannot be ordered against each other
    """
    try:
        if a < b:
            return Comparison.LT
        if b < a:
            return Comparison.GT
    except TypeError as err:
        raise TypeError(_unorderable_message(a, b)) from err
    return Comparison.EQ


def _unorderable_message(a: Any, b: Any) -> str:
    if isinstance(a, datetime) and isinstance(b, datetime):
        return (
            f"Cannot compare naive and timezone-aware datetimes.\n"
            f"Got: {a!r} and {b!r}\n"
            f"Hint: Give every bound timezone info:\n"
            f"  dt = datetime(..., tzinfo=timezone.utc)  # or ZoneInfo('US/Pacific')"
        )
    return (
        f"Interval bounds must be mutually orderable.\n"
        f"Got {type(a).__name__!r}: {a!r} and {type(b).__name__!r}: {b!r}\n"
        f"Hint: Use values of a single ordered type (int, str, date, ...),\n"
        f"      or wrap them with functools.cmp_to_key(your_compare)"
    )
