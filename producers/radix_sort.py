"""Radix sort producer."""

from typing import Any, Dict, Iterator, List

from steps import Step, StepKind
from steps.errors import ValidationError, INVALID_RADIX
from .sort_producer import SortProducer


class RadixSortProducer(SortProducer):
    """LSD radix sort (base 10) over non-negative integers."""

    name = "radix_sort"
    title = "Radix Sort"
    base = 10

    def parse(self, fields: Dict[str, Any]) -> List:
        values = super().parse(fields)
        if any(not isinstance(v, int) or v < 0 for v in values):
            raise ValidationError(INVALID_RADIX)
        return values

    def sort(self, array: List) -> Iterator[Step]:
        place = 1
        largest = max(array)
        while True:
            buckets = [[] for _ in range(self.base)]
            for index, value in enumerate(array):
                digit = (value // place) % self.base
                buckets[digit].append(value)
                yield Step(StepKind.DISTRIBUTE,
                           {"index": index, "value": value, "digit": digit, "place": place},
                           f"Distributing {value} to bucket {digit}")
            array[:] = [value for bucket in buckets for value in bucket]
            yield Step(StepKind.COLLECT, {"values": array, "place": place},
                       f"Collecting from buckets (place {place})")
            place *= self.base
            if largest // place == 0:
                return
