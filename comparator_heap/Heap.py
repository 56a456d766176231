"This module operates with Max-Heap, ordered by an externally supplied Comparator"
from collections.abc import Iterable
from typing import Generic, TypeVar

from .Comparator import Comparator

T = TypeVar("T")


class HeapError(Exception):
    pass


class EmptyHeapError(HeapError, IndexError):
    def __init__(self) -> None:
        super().__init__("pop from empty heap")


class InvalidIndexError(HeapError, IndexError):
    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"heap index {index} out of range for heap of length {length}")
        self.index = index
        self.length = length


class SortedHeapError(HeapError):
    def __init__(self) -> None:
        super().__init__("heap was consumed by sort() and is no longer a heap")


def parent_index(child_index: int) -> int:
    return (child_index - 1) // 2


def left_child_index(parent_index: int) -> int:
    return 2 * parent_index + 1


def right_child_index(parent_index: int) -> int:
    return 2 * parent_index + 2


class Heap(Generic[T]):
    """Array-backed binary max-heap.

    For every index `i` with children `2i+1`/`2i+2`, `comparator.less(parent, child)` is
    False. The comparator is borrowed from the caller and must keep the same ordering for
    the lifetime of the heap.

    `items` passed to the constructor are copied and adopted in the given order, they
    must already satisfy the invariant. Use `heapify` to build a heap from arbitrary data.
    """

    def __init__(self, comparator: Comparator[T], items: Iterable[T] = ()) -> None:
        self.comparator = comparator
        self._slice: list[T] = list(items)
        self._sorted = False

    @classmethod
    def heapify(cls, elements: Iterable[T], comparator: Comparator[T]) -> "Heap[T]":
        heap = cls(comparator, elements)
        end = len(heap._slice) - 1
        for start in range(parent_index(end), -1, -1):
            heap._sift_down(start, end)
        return heap

    @property
    def items(self) -> tuple[T, ...]:
        return tuple(self._slice)

    @property
    def is_sorted(self) -> bool:
        return self._sorted

    def __len__(self) -> int:
        return len(self._slice)

    def __getitem__(self, i: int) -> T:
        return self._slice[i]

    def __setitem__(self, i: int, val: T) -> None:
        "Replaces the element at index i in place, follow with `repair_up(i)` or `repair_down(i)`"
        self._check_not_sorted()
        self._check_index(i)
        self._slice[i] = val

    def __repr__(self) -> str:
        state = "sorted" if self._sorted else "heap"
        return f"{type(self).__name__}({state}, {self._slice!r})"

    def pop(self) -> T:
        "Removes the root (the maximum) and returns it, raises EmptyHeapError if there is none"
        self._check_not_sorted()
        if not self._slice:
            raise EmptyHeapError

        end = len(self._slice) - 1
        root = self._slice[0]
        if end == 0:
            self._slice.clear()
            return root

        self._swap_items(0, end)
        self._slice.pop()
        self._sift_down(0, end - 1)
        return root

    def push(self, val: T) -> None:
        self._check_not_sorted()
        self._slice.append(val)
        self._sift_up(len(self._slice) - 1)

    def repair_down(self, i: int) -> None:
        """Sift down starting at index i, after the element there became smaller.

        Only re-establishes the invariant when the subtree below i was the only possible
        violation. Repairing in the wrong direction for the mutation made is not detected.
        """
        self._check_not_sorted()
        self._check_index(i)
        self._sift_down(i, len(self._slice) - 1)

    def repair_up(self, i: int) -> None:
        """Sift up starting at index i, after the element there became larger.

        Same caller contract as `repair_down`, for the path from i to the root.
        """
        self._check_not_sorted()
        self._check_index(i)
        self._sift_up(i)

    def sort(self) -> None:
        """Heapsort in place: the backing sequence ends up in ascending order.

        This consumes the heap. Afterwards `items` holds the sorted values and every
        heap operation raises SortedHeapError.
        """
        self._check_not_sorted()
        for end in range(len(self._slice) - 1, -1, -1):
            self._swap_items(0, end)
            self._sift_down(0, end - 1)
        self._sorted = True

    def is_valid(self) -> bool:
        less = self.comparator.less
        return not any(less(self._slice[parent_index(i)], self._slice[i]) for i in range(1, len(self._slice)))

    def _check_not_sorted(self) -> None:
        if self._sorted:
            raise SortedHeapError

    def _check_index(self, i: int) -> None:
        if not 0 <= i < len(self._slice):
            raise InvalidIndexError(i, len(self._slice))

    def _sift_down(self, start: int, end: int) -> None:
        "`end` is the last index of the active region, inclusive"
        arr, less = self._slice, self.comparator.less
        root = start
        while (child := left_child_index(root)) <= end:
            swap = root
            if less(arr[swap], arr[child]):
                swap = child
            if child + 1 <= end and less(arr[swap], arr[child + 1]):
                swap = child + 1
            if swap == root:
                return
            self._swap_items(root, swap)
            root = swap

    def _sift_up(self, start: int) -> None:
        arr, less = self._slice, self.comparator.less
        root = start
        while (parent := parent_index(root)) >= 0:
            if not less(arr[parent], arr[root]):
                return
            self._swap_items(root, parent)
            root = parent

    def _swap_items(self, i: int, j: int) -> None:
        self._slice[i], self._slice[j] = self._slice[j], self._slice[i]

    __slots__ = ("comparator", "_slice", "_sorted")


def new_heap(comparator: Comparator[T]) -> Heap[T]:
    return Heap(comparator)


def heapify(elements: Iterable[T], comparator: Comparator[T]) -> Heap[T]:
    return Heap.heapify(elements, comparator)
