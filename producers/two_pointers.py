"""Two pointers (pair sum) producer."""

from typing import Any, Dict, Iterator, Tuple

from steps import Step, StepKind
from steps.errors import ValidationError, UNSORTED_ARRAY, INVALID_PAIR_TARGET
from .base_producer import BaseProducer
from .parsing import parse_numbers, parse_number


class TwoPointersProducer(BaseProducer):
    """Find two values in an ascending array that add up to a target."""

    name = "two_pointers"
    title = "Two Pointers: Pair Sum"
    fields = ("array", "target")

    def parse(self, fields: Dict[str, Any]) -> Tuple[list, Any]:
        array = parse_numbers(fields["array"], self.config)
        if any(a > b for a, b in zip(array, array[1:])):
            raise ValidationError(UNSORTED_ARRAY)
        target = parse_number(fields["target"], INVALID_PAIR_TARGET)
        return array, target

    def initial_state(self, parsed: Tuple[list, Any]) -> Dict[str, Any]:
        array, target = parsed
        return {"array": list(array), "target": target}

    def generate(self, parsed: Tuple[list, Any]) -> Iterator[Step]:
        array, target = parsed
        left, right = 0, len(array) - 1
        yield Step(StepKind.START, {"left": left, "right": right, "target": target},
                   f"Looking for a pair with sum {target}")

        while left < right:
            total = array[left] + array[right]
            yield Step(StepKind.COMPARE, {"left": left, "right": right, "sum": total},
                       f"{array[left]} + {array[right]} = {total}")
            if total == target:
                yield Step(StepKind.FOUND, {"left": left, "right": right},
                           f"Found pair ({array[left]}, {array[right]}) at indices {left} and {right}")
                return
            if total < target:
                left += 1
            else:
                right -= 1
            yield Step(StepKind.MOVE_POINTER, {"left": left, "right": right},
                       f"Sum too {'small' if total < target else 'large'}, "
                       f"move {'left' if total < target else 'right'} pointer")

        yield Step(StepKind.NOT_FOUND, {"target": target}, f"No pair sums to {target}.")
