"""Quick sort producer."""

from typing import Iterator, List

from steps import Step, StepKind
from .sort_producer import SortProducer


class QuickSortProducer(SortProducer):
    """Quick sort with Lomuto partitioning (last element as pivot)."""

    name = "quick_sort"
    title = "Quick Sort"

    def sort(self, array: List) -> Iterator[Step]:
        yield from self._sort_range(array, 0, len(array) - 1)

    def _sort_range(self, array: List, low: int, high: int) -> Iterator[Step]:
        if low > high:
            return
        if low == high:
            yield self.mark_sorted(low)
            return

        yield Step(StepKind.HIGHLIGHT, {"indices": (high,), "role": "pivot", "range": (low, high + 1)},
                   f"Pivot {array[high]}")
        boundary = low
        for j in range(low, high):
            yield self.compare(array, j, high)
            if array[j] < array[high]:
                if boundary != j:
                    yield self.swap(array, boundary, j)
                boundary += 1
        if boundary != high:
            yield self.swap(array, boundary, high)
        yield self.mark_sorted(boundary)

        yield from self._sort_range(array, low, boundary - 1)
        yield from self._sort_range(array, boundary + 1, high)
