"""Shared base for array sorting producers."""

from abc import abstractmethod
from typing import Any, Dict, Iterator, List

from steps import Step, StepKind
from .base_producer import BaseProducer
from .parsing import parse_numbers


class SortProducer(BaseProducer):
    """Sorting producer: brackets the algorithm's steps with START and DONE."""

    fields = ("array",)

    def parse(self, fields: Dict[str, Any]) -> List:
        return parse_numbers(fields["array"], self.config)

    def initial_state(self, parsed: List) -> Dict[str, Any]:
        return {"array": list(parsed)}

    def generate(self, parsed: List) -> Iterator[Step]:
        array = list(parsed)
        yield Step(StepKind.START, {"array": array}, "Ready to sort")
        yield from self.sort(array)
        yield Step(StepKind.DONE, {"sorted": True, "array": array}, "Sorting complete")

    @abstractmethod
    def sort(self, array: List) -> Iterator[Step]:
        """
        Sort `array` in place, yielding a step for each visible action.

        Args:
            array: Working copy of the input
        """
        pass

    @staticmethod
    def compare(array: List, i: int, j: int) -> Step:
        return Step(StepKind.COMPARE, {"indices": (i, j)},
                    f"Compare {array[i]} and {array[j]}")

    @staticmethod
    def swap(array: List, i: int, j: int, **extra) -> Step:
        """Swap two slots of `array` and describe it."""
        array[i], array[j] = array[j], array[i]
        return Step(StepKind.SWAP, {"indices": (i, j), **extra},
                    f"Swap {array[j]} and {array[i]}")

    @staticmethod
    def mark_sorted(*indices: int) -> Step:
        return Step(StepKind.MARK_SORTED, {"indices": indices},
                    f"Index {', '.join(str(i) for i in indices)} in final position")
