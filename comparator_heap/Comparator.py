from collections.abc import Callable
from typing import Any, Generic, Protocol, TypeVar

T = TypeVar("T")
K = TypeVar("K")


class Comparator(Protocol[T]):
    """Ordering capability a Heap is bound to.

    `less` must be a strict weak ordering. The same instance has to keep the same
    ordering for the whole life of every heap using it.
    """

    def equal(self, a: T, b: T) -> bool:
        ...

    def less(self, a: T, b: T) -> bool:
        ...


class NaturalComparator(Generic[T]):
    def equal(self, a: T, b: T) -> bool:
        return a == b

    def less(self, a: T, b: T) -> bool:
        return a < b

    __slots__ = ()


class ReversedComparator(Generic[T]):
    "Flips the ordering of `inner`, a max-heap over it behaves as a min-heap"

    def __init__(self, inner: Comparator[T]) -> None:
        self.inner = inner

    def equal(self, a: T, b: T) -> bool:
        return self.inner.equal(a, b)

    def less(self, a: T, b: T) -> bool:
        return self.inner.less(b, a)

    __slots__ = ("inner",)


class KeyComparator(Generic[T, K]):
    def __init__(self, key: Callable[[T], K], inner: Comparator[K] = NaturalComparator()) -> None:
        self.key = key
        self.inner = inner

    def equal(self, a: T, b: T) -> bool:
        return self.inner.equal(self.key(a), self.key(b))

    def less(self, a: T, b: T) -> bool:
        return self.inner.less(self.key(a), self.key(b))

    __slots__ = ("key", "inner")


class _CmpComparator(Generic[T]):
    def __init__(self, mycmp: Callable[[T, T], int]) -> None:
        self.mycmp = mycmp

    def equal(self, a: T, b: T) -> bool:
        return self.mycmp(a, b) == 0

    def less(self, a: T, b: T) -> bool:
        return self.mycmp(a, b) < 0

    __slots__ = ("mycmp",)


def cmp_to_comparator(mycmp: Callable[[Any, Any], int]) -> Comparator:
    """Convert a cmp= function into a Comparator"""
    return _CmpComparator(mycmp)


class CountingComparator(Generic[T]):
    def __init__(self, inner: Comparator[T] = NaturalComparator()) -> None:
        self.inner = inner
        self.less_count = 0
        self.equal_count = 0

    def equal(self, a: T, b: T) -> bool:
        self.equal_count += 1
        return self.inner.equal(a, b)

    def less(self, a: T, b: T) -> bool:
        self.less_count += 1
        return self.inner.less(a, b)

    def reset(self) -> None:
        self.less_count = 0
        self.equal_count = 0

    __slots__ = ("inner", "less_count", "equal_count")
