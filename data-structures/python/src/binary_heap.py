"""Array-backed binary min-heap with an optional comparison function.

The smallest element under the active ordering sits at index 0. Ordering comes
from ``comparator(left, right)`` when one is given (negative, zero or positive,
like ``cmp``), otherwise from the elements' own ``<`` and ``>``.

Non-strict accessors (``extract_min``, ``peek_min``) return ``None`` on an empty
heap; strict ones (``remove_min``, ``element_min``) raise ``EmptyHeapError``.
"""

from typing import Any, Callable, Generic, List, NoReturn, Optional, TypeVar

T = TypeVar('T')

Comparator = Callable[[T, T], int]


class EmptyHeapError(IndexError):
    pass


class BinaryHeap(Generic[T]):
    def __init__(self, comparator: Optional[Comparator] = None) -> None:
        if comparator is not None and not callable(comparator):
            raise TypeError("comparator must be callable")
        self._data: List[T] = []
        self._comparator: Optional[Comparator] = comparator

    @property
    def comparator(self) -> Optional[Comparator]:
        return self._comparator

    def insert(self, item: T) -> bool:
        if item is None:
            raise ValueError("cannot insert None into heap")
        target = self._sift_up_target(item)
        self._data.append(item)
        index = len(self._data) - 1
        while index > target:
            parent = (index - 1) // 2
            self._data[index] = self._data[parent]
            index = parent
        self._data[target] = item
        return True

    def extract_min(self) -> Optional[T]:
        if not self._data:
            return None
        if len(self._data) == 1:
            return self._data.pop()
        last = self._data[-1]
        path = self._sift_down_path(0, last, len(self._data) - 1)
        result = self._data[0]
        self._data.pop()
        self._place_along(path, last)
        return result

    def peek_min(self) -> Optional[T]:
        if not self._data:
            return None
        return self._data[0]

    def remove_min(self) -> T:
        if not self._data:
            raise EmptyHeapError("remove_min from empty heap")
        return self.extract_min()

    def element_min(self) -> T:
        if not self._data:
            raise EmptyHeapError("element_min from empty heap")
        return self._data[0]

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    # Queue-style and legacy heap names for the same operations.
    offer = insert
    add = insert
    push = insert
    poll = extract_min
    peek = peek_min
    remove = remove_min
    pop = remove_min
    element = element_min

    def copy(self) -> 'BinaryHeap[T]':
        clone: BinaryHeap[T] = BinaryHeap(self._comparator)
        clone._data = self._data.copy()
        return clone

    @staticmethod
    def from_array(arr: List[T], comparator: Optional[Comparator] = None) -> 'BinaryHeap[T]':
        """Build a heap from an array.

        Note: Creates a shallow copy of the input array.
        """
        heap: BinaryHeap[T] = BinaryHeap(comparator)
        data = list(arr)
        if any(item is None for item in data):
            raise ValueError("cannot insert None into heap")
        heap._data = data
        for i in range(len(data) // 2 - 1, -1, -1):
            item = data[i]
            heap._place_along(heap._sift_down_path(i, item, len(data)), item)
        return heap

    def _compare(self, left: T, right: T) -> int:
        if self._comparator is not None:
            return self._comparator(left, right)
        try:
            return (left > right) - (left < right)
        except TypeError as exc:
            raise TypeError(
                f"'{type(left).__name__}' and '{type(right).__name__}' are not orderable"
            ) from exc

    def _sift_up_target(self, item: T) -> int:
        """Index where ``item`` settles if appended; reads only, never mutates."""
        child = len(self._data)
        while child > 0:
            parent = (child - 1) // 2
            if self._compare(self._data[parent], item) <= 0:
                break
            child = parent
        return child

    def _sift_down_path(self, start: int, item: T, size: int) -> List[int]:
        """Indices ``item`` passes through sinking from ``start`` within ``size`` slots.

        Every comparison happens here, before anything moves, so a comparison
        that raises leaves the heap untouched.
        """
        path = [start]
        parent = start
        while True:
            left = 2 * parent + 1
            if left >= size:
                break
            child = left
            right = left + 1
            if right < size and self._compare(self._data[left], self._data[right]) > 0:
                child = right
            if self._compare(item, self._data[child]) <= 0:
                break
            path.append(child)
            parent = child
        return path

    def _place_along(self, path: List[int], item: T) -> None:
        for upper, lower in zip(path, path[1:]):
            self._data[upper] = self._data[lower]
        self._data[path[-1]] = item

    def _unsupported(self, name: str) -> NoReturn:
        raise NotImplementedError(f"BinaryHeap does not support {name}")

    # Collection operations that would bypass heap order.
    def contains(self, item: Any) -> bool:
        self._unsupported("contains")

    def contains_all(self, items: Any) -> bool:
        self._unsupported("contains_all")

    def remove_item(self, item: Any) -> bool:
        self._unsupported("remove_item")

    def add_all(self, items: Any) -> bool:
        self._unsupported("add_all")

    def remove_all(self, items: Any) -> bool:
        self._unsupported("remove_all")

    def retain_all(self, items: Any) -> bool:
        self._unsupported("retain_all")

    def to_array(self) -> List[T]:
        self._unsupported("to_array")

    def clear(self) -> None:
        self._unsupported("clear")

    def __contains__(self, item: Any) -> bool:
        self._unsupported("membership testing")

    def __iter__(self) -> NoReturn:
        self._unsupported("iteration")

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __repr__(self) -> str:
        return f"BinaryHeap({self._data})"

    def __str__(self) -> str:
        return f"BinaryHeap(size={len(self._data)})"
