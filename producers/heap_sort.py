"""Heap sort producer."""

from typing import Iterator, List, Optional

from steps import Step, StepKind
from .sort_producer import SortProducer


class HeapSortProducer(SortProducer):
    """
    Heap sort on a max-heap.

    Every sift exchange is a single SWAP step whose payload names the slots
    that were compared. Moving the root to the end of the heap is a SWAP that
    also marks the destination slot sorted; when the element brought up to
    the root has to sink, its first exchange is folded into the same step as
    a three-slot rotation `(0, child, end)`.
    """

    name = "heap_sort"
    title = "Heap Sort"

    @staticmethod
    def _larger_child(array: List, root: int, end: int) -> Optional[int]:
        """Child of `root` that must move up, or None if the heap holds."""
        left, right = 2 * root + 1, 2 * root + 2
        largest = root
        if left < end and array[left] > array[largest]:
            largest = left
        if right < end and array[right] > array[largest]:
            largest = right
        return None if largest == root else largest

    @staticmethod
    def _compared(root: int, end: int) -> tuple:
        return tuple(i for i in (root, 2 * root + 1, 2 * root + 2) if i < end)

    def _sift_down(self, array: List, root: int, end: int) -> Iterator[Step]:
        """Restore the heap property below `root` within array[:end]."""
        while True:
            largest = self._larger_child(array, root, end)
            if largest is None:
                return
            yield self.swap(array, root, largest, compared=self._compared(root, end), heap_size=end)
            root = largest

    def sort(self, array: List) -> Iterator[Step]:
        n = len(array)
        for root in range(n // 2 - 1, -1, -1):
            yield from self._sift_down(array, root, n)

        for end in range(n - 1, 0, -1):
            array[0], array[end] = array[end], array[0]
            child = self._larger_child(array, 0, end)
            if child is None:
                yield Step(StepKind.SWAP, {"indices": (0, end), "sorted": (end,), "heap_size": end},
                           f"Move max {array[end]} to index {end}")
                continue
            # slot 0 <- child, child <- old last, end <- old max
            array[0], array[child] = array[child], array[0]
            yield Step(StepKind.SWAP,
                       {"indices": (0, child, end), "sorted": (end,), "heap_size": end,
                        "compared": self._compared(0, end)},
                       f"Move max {array[end]} to index {end}, sift {array[child]} down")
            yield from self._sift_down(array, child, end)
