"""Bubble sort producer."""

from typing import Iterator, List

from steps import Step
from .sort_producer import SortProducer


class BubbleSortProducer(SortProducer):
    """Bubble sort with early exit once a pass makes no swaps."""

    name = "bubble_sort"
    title = "Bubble Sort"

    def sort(self, array: List) -> Iterator[Step]:
        n = len(array)
        for i in range(n - 1):
            swapped = False
            for j in range(n - 1 - i):
                yield self.compare(array, j, j + 1)
                if array[j] > array[j + 1]:
                    yield self.swap(array, j, j + 1)
                    swapped = True
            if not swapped:
                # Remaining prefix is already in order
                yield self.mark_sorted(*range(n - i))
                return
            yield self.mark_sorted(n - 1 - i)
        if n:
            yield self.mark_sorted(0)
