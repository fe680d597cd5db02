"""Sliding window (maximum fixed-size window sum) producer."""

from typing import Any, Dict, Iterator, Tuple

from steps import Step, StepKind
from steps.errors import ValidationError, INVALID_WINDOW
from .base_producer import BaseProducer
from .parsing import parse_numbers, parse_int


class SlidingWindowProducer(BaseProducer):
    """Maximum sum over all windows of a fixed size."""

    name = "sliding_window"
    title = "Sliding Window"
    fields = ("array", "window")

    def parse(self, fields: Dict[str, Any]) -> Tuple[list, int]:
        array = parse_numbers(fields["array"], self.config)
        size = parse_int(fields["window"], INVALID_WINDOW)
        if not 1 <= size <= len(array):
            raise ValidationError(INVALID_WINDOW)
        return array, size

    def initial_state(self, parsed: Tuple[list, int]) -> Dict[str, Any]:
        array, size = parsed
        return {"array": list(array), "window": size}

    def generate(self, parsed: Tuple[list, int]) -> Iterator[Step]:
        array, size = parsed
        yield Step(StepKind.START, {"start": 0, "end": 0, "window": size},
                   f"Window size {size}")

        total = 0
        for i in range(size):
            total += array[i]
            yield Step(StepKind.WINDOW, {"start": 0, "end": i + 1, "sum": total, "added": i},
                       f"Add {array[i]}: sum = {total}")
        best, best_start = total, 0
        yield Step(StepKind.HIGHLIGHT, {"start": 0, "end": size, "best": best},
                   f"Fixed window initialized: best = {best}")

        for end in range(size, len(array)):
            start = end - size + 1
            total += array[end] - array[start - 1]
            yield Step(StepKind.WINDOW,
                       {"start": start, "end": end + 1, "sum": total, "added": end, "removed": start - 1},
                       f"Shift window to [{start}, {end}]: sum = {total}")
            if total > best:
                best, best_start = total, start
                yield Step(StepKind.HIGHLIGHT, {"start": start, "end": end + 1, "best": best},
                           f"New best sum {best}")

        yield Step(StepKind.DONE, {"best": best, "start": best_start, "end": best_start + size},
                   f"Maximum window sum is {best} at [{best_start}, {best_start + size - 1}]")
