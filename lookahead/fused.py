from collections.abc import Iterable, Iterator
from enum import Enum, auto
from typing import Generic, TypeVar

from .size_hint import EMPTY, SizeHint, size_hint_of, sub

T = TypeVar("T")


class FusedState(Enum):
    ACTIVE = auto()
    DONE = auto()


class Fused(Generic[T]):
    """
    Iterator wrapper whose exhaustion is sticky: once the wrapped iterator
    raises ``StopIteration`` it is never asked for another item.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._initial_hint: SizeHint = size_hint_of(iterable)
        self._iterator: Iterator[T] = iter(iterable)
        # only an iterator's own hint shrinks as it is pulled from
        self._hint_source: Iterable[T] | None = None
        if self._iterator is iterable and callable(getattr(iterable, "size_hint", None)):
            self._hint_source = iterable
        self._state: FusedState = FusedState.ACTIVE
        self._pulled: int = 0

    @property
    def state(self) -> FusedState:
        return self._state

    @property
    def is_done(self) -> bool:
        return self._state == FusedState.DONE

    def __iter__(self) -> "Fused[T]":
        return self

    def __next__(self) -> T:
        if self._state == FusedState.DONE:
            raise StopIteration
        try:
            item = next(self._iterator)
        except StopIteration:
            self._state = FusedState.DONE
            raise
        self._pulled += 1
        return item

    def take(self, count: int) -> list[T]:
        items: list[T] = []
        for _ in range(count):
            try:
                items.append(next(self))
            except StopIteration:
                break
        return items

    def size_hint(self) -> SizeHint:
        if self._state == FusedState.DONE:
            return EMPTY
        if self._hint_source is not None:
            # live objects already account for what was pulled from them
            return size_hint_of(self._hint_source)
        return sub(self._initial_hint, self._pulled)
