from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class CountingIterator(Generic[T]):
    """记录被拉取次数的迭代器，用于验证不会多拉取元素"""

    def __init__(self, items: Iterable[T]) -> None:
        self._iterator: Iterator[T] = iter(items)
        self.pulls: int = 0

    def __iter__(self) -> "CountingIterator[T]":
        return self

    def __next__(self) -> T:
        self.pulls += 1
        return next(self._iterator)


class RevivingIterator:
    """耗尽之后又会重新产出元素的迭代器（违反粘性耗尽约定）"""

    def __init__(self) -> None:
        self.calls: int = 0

    def __iter__(self) -> "RevivingIterator":
        return self

    def __next__(self) -> int:
        self.calls += 1
        if self.calls == 2:
            raise StopIteration
        return self.calls


class HintedIterator:
    def __init__(self, items: list[int], upper_known: bool = True) -> None:
        self._items: list[int] = list(items)
        self._upper_known: bool = upper_known

    def __iter__(self) -> "HintedIterator":
        return self

    def __next__(self) -> int:
        if not self._items:
            raise StopIteration
        return self._items.pop(0)

    def size_hint(self) -> tuple[int, int | None]:
        count = len(self._items)
        return count, (count if self._upper_known else None)


class HintedBag:
    """带 size_hint() 的容器，每次 iter() 返回新的迭代器，提示值不随消费变化"""

    def __init__(self, items: list[int]) -> None:
        self._items: list[int] = list(items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def size_hint(self) -> tuple[int, int | None]:
        count = len(self._items)
        return count, count
