"""Selection sort producer."""

from typing import Iterator, List

from steps import Step, StepKind
from .sort_producer import SortProducer


class SelectionSortProducer(SortProducer):
    """Selection sort: repeatedly move the minimum of the unsorted suffix forward."""

    name = "selection_sort"
    title = "Selection Sort"

    def sort(self, array: List) -> Iterator[Step]:
        n = len(array)
        for i in range(n):
            minimum = i
            yield Step(StepKind.HIGHLIGHT, {"indices": (i,), "role": "minimum"},
                       f"Current minimum is {array[i]}")
            for j in range(i + 1, n):
                yield self.compare(array, minimum, j)
                if array[j] < array[minimum]:
                    minimum = j
                    yield Step(StepKind.HIGHLIGHT, {"indices": (j,), "role": "minimum"},
                               f"New minimum {array[j]}")
            if minimum != i:
                yield self.swap(array, i, minimum)
            yield self.mark_sorted(i)
