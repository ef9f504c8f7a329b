"""Binary heaps: a max-heap container, heapify helpers and heap sort."""

from __future__ import annotations

from typing import Iterable, Iterator, List, MutableSequence


def max_heapify(items: MutableSequence[int], size: int, index: int) -> None:
    """Sift ``items[index]`` down within the first ``size`` items of a max-heap."""
    largest = index
    left, right = 2 * index + 1, 2 * index + 2
    if left < size and items[largest] < items[left]:
        largest = left
    if right < size and items[largest] < items[right]:
        largest = right
    if largest != index:
        items[largest], items[index] = items[index], items[largest]
        max_heapify(items, size, largest)


def min_heapify(items: MutableSequence[int], size: int, index: int) -> None:
    """Sift ``items[index]`` down within the first ``size`` items of a min-heap."""
    smallest = index
    left, right = 2 * index + 1, 2 * index + 2
    if left < size and items[smallest] > items[left]:
        smallest = left
    if right < size and items[smallest] > items[right]:
        smallest = right
    if smallest != index:
        items[smallest], items[index] = items[index], items[smallest]
        min_heapify(items, size, smallest)


def heap_sort(items: Iterable[int]) -> List[int]:
    """Return the items in ascending order, sorted with a max-heap."""
    result = list(items)
    n = len(result)
    for i in range(n // 2 - 1, -1, -1):
        max_heapify(result, n, i)
    for size in range(n - 1, 0, -1):
        result[0], result[size] = result[size], result[0]
        max_heapify(result, size, 0)
    return result


class MaxHeap:
    """A max-heap stored in a list; iteration yields the heap's array order."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: List[int] = []
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        """Add ``value`` to the heap."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] >= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def pop(self) -> int:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        items = self._items
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            max_heapify(items, len(items), 0)
        return top

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))