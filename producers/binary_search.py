"""Binary search producer."""

from typing import Any, Dict, Iterator, Tuple

from steps import Step, StepKind
from steps.errors import ValidationError, UNSORTED_ARRAY, INVALID_TARGET
from .base_producer import BaseProducer
from .parsing import parse_numbers, parse_number


class BinarySearchProducer(BaseProducer):
    """Binary search for a target in an ascending array."""

    name = "binary_search"
    title = "Binary Search"
    fields = ("array", "target")

    def parse(self, fields: Dict[str, Any]) -> Tuple[list, Any]:
        array = parse_numbers(fields["array"], self.config)
        if any(a > b for a, b in zip(array, array[1:])):
            raise ValidationError(UNSORTED_ARRAY)
        target = parse_number(fields["target"], INVALID_TARGET)
        return array, target

    def initial_state(self, parsed: Tuple[list, Any]) -> Dict[str, Any]:
        array, target = parsed
        return {"array": list(array), "target": target}

    def generate(self, parsed: Tuple[list, Any]) -> Iterator[Step]:
        array, target = parsed
        low, high = 0, len(array) - 1
        yield Step(StepKind.START, {"low": low, "high": high, "target": target},
                   f"Searching for {target} in [{low}, {high}]")

        while low <= high:
            mid = (low + high) // 2
            yield Step(StepKind.COMPARE, {"low": low, "high": high, "mid": mid, "value": array[mid]},
                       f"Compare arr[{mid}] = {array[mid]} with {target}")
            if array[mid] == target:
                yield Step(StepKind.FOUND, {"index": mid}, f"Found at index {mid}")
                return
            if array[mid] < target:
                low = mid + 1
            else:
                high = mid - 1
            yield Step(StepKind.MOVE_POINTER, {"low": low, "high": high},
                       f"Search range is now [{low}, {high}]")

        yield Step(StepKind.NOT_FOUND, {"target": target}, f"Not found: {target}.")
