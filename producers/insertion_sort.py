"""Insertion sort producer."""

from typing import Iterator, List

from steps import Step
from .sort_producer import SortProducer


class InsertionSortProducer(SortProducer):
    """Insertion sort, shifting the current element left by adjacent swaps."""

    name = "insertion_sort"
    title = "Insertion Sort"

    def sort(self, array: List) -> Iterator[Step]:
        for i in range(1, len(array)):
            j = i
            while j > 0:
                yield self.compare(array, j - 1, j)
                if array[j - 1] <= array[j]:
                    break
                yield self.swap(array, j - 1, j)
                j -= 1
