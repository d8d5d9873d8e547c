from collections import deque
from collections.abc import Iterable, Iterator
from logging import Logger
from typing import Generic, Self, TypeVar, cast

from .fused import Fused
from .size_hint import SizeHint, add, size_hint_of

T = TypeVar("T")
D = TypeVar("D")

_MISSING = object()


class Lookahead(Generic[T], Iterator[T]):
    """
    Iterator that can peek any number of items ahead without consuming them.

    Items pulled by ``peek`` are staged in a buffer and handed out by
    ``next()`` in their original order. The wrapped iterable is pulled at most
    once per position and never past the furthest offset requested.

    The wrapped iterable must not yield again after it has been exhausted;
    the adapter never asks it twice either way.
    """

    def __init__(
        self,
        iterable: Iterable[T],
        capacity: int | None = None,
        logger: Logger | None = None,
    ) -> None:
        if capacity is not None:
            if not isinstance(capacity, int) or isinstance(capacity, bool):
                raise TypeError(f"capacity must be an int, got {type(capacity).__name__}")
            if capacity < 0:
                raise ValueError(f"capacity must be non-negative, got {capacity}")

        self._source: Fused[T] = Fused(iterable)
        self._buffer: deque[T] = deque()
        self._capacity: int | None = capacity
        self._logger: Logger | None = logger

    @classmethod
    def with_capacity(cls, iterable: Iterable[T], capacity: int, logger: Logger | None = None) -> Self:
        # deque cannot reserve storage, the hint never bounds the buffer
        return cls(iterable, capacity=capacity, logger=logger)

    @property
    def has_next(self) -> bool:
        return self.peek(0, _MISSING) is not _MISSING

    def peek(self, n: int = 0, default: D | None = None) -> T | D | None:
        """
        Return the item ``n`` positions ahead without advancing.

        ``peek(0)`` is the item the next ``next()`` call returns. Past the end
        of the sequence ``default`` is returned. The result is the buffered
        object itself, the same one ``next()`` will later hand out.
        """
        if n < 0:
            raise ValueError(f"lookahead offset must be non-negative, got {n}")

        enqueued = len(self._buffer)
        if n >= enqueued:
            self._fill(n, n - enqueued + 1)
        if n < len(self._buffer):
            return self._buffer[n]
        return default

    def size_hint(self) -> SizeHint:
        queued = len(self._buffer)
        return add(self._source.size_hint(), SizeHint(queued, queued))

    def __length_hint__(self) -> int:
        return self.size_hint().lower

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> T:
        if self._buffer:
            return self._buffer.popleft()
        return next(self._source)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(buffered={len(self._buffer)}, "
            f"source={self._source.state.name}, capacity={self._capacity})"
        )

    def _fill(self, n: int, count: int) -> None:
        if self._source.is_done:
            return
        items = self._source.take(count)
        self._buffer.extend(items)

        if self._logger is not None:
            self._logger.debug(f"prefetched {len(items)}/{count} items for offset {n}")
            if self._source.is_done:
                self._logger.debug(f"source exhausted with {len(self._buffer)} items buffered")


class ExactLookahead(Lookahead[T]):
    """Lookahead over a source whose remaining count is always known."""

    def __len__(self) -> int:
        hint = self.size_hint()
        if not hint.exact:
            raise TypeError(f"remaining count is not known exactly, got {hint}")
        return cast(int, hint.upper)


def lookahead(
    iterable: Iterable[T],
    capacity: int | None = None,
    logger: Logger | None = None,
) -> Lookahead[T]:
    """
    Wrap ``iterable`` in a lookahead iterator.

    Returns an ``ExactLookahead`` (which supports ``len()``) when the remaining
    count of ``iterable`` is known exactly, a plain ``Lookahead`` otherwise.
    """
    if size_hint_of(iterable).exact:
        return ExactLookahead(iterable, capacity=capacity, logger=logger)
    return Lookahead(iterable, capacity=capacity, logger=logger)
