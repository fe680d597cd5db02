"""Merge sort producer."""

from typing import Iterator, List

from steps import Step, StepKind
from .sort_producer import SortProducer


class MergeSortProducer(SortProducer):
    """Top-down merge sort; each merge writes its whole range in one MERGE step."""

    name = "merge_sort"
    title = "Merge Sort"

    def sort(self, array: List) -> Iterator[Step]:
        yield from self._sort_range(array, 0, len(array))

    def _sort_range(self, array: List, start: int, end: int) -> Iterator[Step]:
        if end - start < 2:
            return
        middle = (start + end) // 2
        yield Step(StepKind.HIGHLIGHT, {"range": (start, end), "role": "split", "middle": middle},
                   f"Split [{start}, {end}) at {middle}")
        yield from self._sort_range(array, start, middle)
        yield from self._sort_range(array, middle, end)
        yield from self._merge(array, start, middle, end)

    def _merge(self, array: List, start: int, middle: int, end: int) -> Iterator[Step]:
        merged = []
        i, j = start, middle
        while i < middle and j < end:
            yield self.compare(array, i, j)
            if array[i] <= array[j]:
                merged.append(array[i])
                i += 1
            else:
                merged.append(array[j])
                j += 1
        merged.extend(array[i:middle])
        merged.extend(array[j:end])
        array[start:end] = merged
        yield Step(StepKind.MERGE, {"start": start, "end": end, "values": merged},
                   f"Merge [{start}, {end}) -> {', '.join(str(v) for v in merged)}")
