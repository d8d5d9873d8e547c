from collections.abc import Iterable, Iterator, Sized
from typing import NamedTuple


class SizeHint(NamedTuple):
    lower: int
    upper: int | None

    @property
    def exact(self) -> bool:
        return self.upper is not None and self.lower == self.upper


UNKNOWN = SizeHint(0, None)
EMPTY = SizeHint(0, 0)


def size_hint_of(iterable: Iterable) -> SizeHint:
    """
    Probe how many items an iterable will yield before it is iterated.

    Objects exposing ``size_hint()`` are asked directly. Collections that know
    their length (and are not iterators themselves) are exact. Anything else
    is unknown.
    """
    size_hint = getattr(iterable, "size_hint", None)
    if callable(size_hint):
        lower, upper = size_hint()
        return SizeHint(lower, upper)
    if isinstance(iterable, Sized) and not isinstance(iterable, Iterator):
        count = len(iterable)
        return SizeHint(count, count)
    return UNKNOWN


def add(left: SizeHint, right: SizeHint) -> SizeHint:
    # an unbounded side makes the sum unbounded
    upper: int | None = None
    if left.upper is not None and right.upper is not None:
        upper = left.upper + right.upper
    return SizeHint(left.lower + right.lower, upper)


def sub(hint: SizeHint, count: int) -> SizeHint:
    upper: int | None = None
    if hint.upper is not None:
        upper = max(hint.upper - count, 0)
    return SizeHint(max(hint.lower - count, 0), upper)
