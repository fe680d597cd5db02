"""Array applier: bar/cell state for sorting and searching visualizations."""

from typing import Any, Callable, Dict, List, Optional, Set, Tuple

import numpy as np

from steps import Step, StepKind, Direction
from .base_applier import VisualApplier


class ArrayApplier(VisualApplier):
    """
    Rendered state of an array visualization.

    Values live in a numpy array. Each slot carries CSS-like class names:
    persistent ones (sorted, found, window, faded) and transient ones that
    only describe the most recent step (comparing, swapping, minimum, pivot,
    active).
    """

    def __init__(self):
        self.values = np.array([])
        self.sorted_mask = np.zeros(0, dtype=bool)
        self.found: Set[int] = set()
        self.transient: Dict[int, Set[str]] = {}
        self.pointers: Dict[str, int] = {}
        self.window: Optional[Tuple[int, int]] = None
        self.best_window: Optional[Tuple[int, int]] = None
        self.window_sum = None
        self.buckets: List[List] = []
        self.status = ""
        self.finished = False

        self._handlers: Dict[StepKind, Callable[[Step], None]] = {
            StepKind.START: self._on_start,
            StepKind.COMPARE: self._on_compare,
            StepKind.SWAP: self._on_swap,
            StepKind.OVERWRITE: self._on_overwrite,
            StepKind.MERGE: self._on_merge,
            StepKind.MARK_SORTED: self._on_mark_sorted,
            StepKind.HIGHLIGHT: self._on_highlight,
            StepKind.MOVE_POINTER: self._on_move_pointer,
            StepKind.WINDOW: self._on_window,
            StepKind.DISTRIBUTE: self._on_distribute,
            StepKind.COLLECT: self._on_collect,
            StepKind.FOUND: self._on_found,
            StepKind.NOT_FOUND: self._on_finished,
            StepKind.DONE: self._on_done,
        }

    def reset(self, initial: Dict[str, Any]):
        self.values = np.array(list(initial.get("array", [])))
        self.sorted_mask = np.zeros(len(self.values), dtype=bool)
        self.found = set()
        self.transient = {}
        self.pointers = {}
        self.window = None
        self.best_window = None
        self.window_sum = None
        self.buckets = []
        self.status = ""
        self.finished = False

    def apply(self, step: Step, direction: Direction = Direction.FORWARD):
        if direction is not Direction.FORWARD:
            raise NotImplementedError("ArrayApplier re-renders from the step prefix instead of undoing")
        self.transient = {}
        handler = self._handlers.get(step.kind)
        if handler is not None:
            handler(step)
        else:
            self._warn_unhandled(step)
        self.status = step.message

    def _mark(self, indices, name: str):
        for index in indices:
            self.transient.setdefault(int(index), set()).add(name)

    def _on_start(self, step: Step):
        for key in ("low", "high", "left", "right"):
            if key in step.payload:
                self.pointers[key] = step.payload[key]

    def _on_compare(self, step: Step):
        payload = step.payload
        if "indices" in payload:
            self._mark(payload["indices"], "comparing")
        if "mid" in payload:
            self.pointers.update(low=payload["low"], high=payload["high"], mid=payload["mid"])
            self._mark([payload["mid"]], "comparing")
        if "left" in payload:
            self.pointers.update(left=payload["left"], right=payload["right"])
            self._mark([payload["left"], payload["right"]], "comparing")

    def _on_swap(self, step: Step):
        # two indices swap; longer tuples rotate, slot k taking the value of slot k + 1
        indices = list(step.payload["indices"])
        self.values[indices] = self.values[indices[1:] + indices[:1]]
        self._mark(indices, "swapping")
        for index in step.get("sorted", ()):
            self.sorted_mask[index] = True

    def _on_overwrite(self, step: Step):
        self.values[step.payload["index"]] = step.payload["value"]
        self._mark([step.payload["index"]], "active")

    def _on_merge(self, step: Step):
        start, end = step.payload["start"], step.payload["end"]
        self.values[start:end] = list(step.payload["values"])
        self._mark(range(start, end), "active")

    def _on_mark_sorted(self, step: Step):
        self.sorted_mask[list(step.payload["indices"])] = True

    def _on_highlight(self, step: Step):
        payload = step.payload
        if "best" in payload:
            self.best_window = (payload["start"], payload["end"])
            self._mark(range(payload["start"], payload["end"]), "active")
        if "indices" in payload:
            self._mark(payload["indices"], payload.get("role", "active"))
        if "range" in payload and payload.get("role") == "split":
            self._mark(range(*payload["range"]), "active")

    def _on_move_pointer(self, step: Step):
        for key in ("low", "high", "left", "right"):
            if key in step.payload:
                self.pointers[key] = step.payload[key]
        self.pointers.pop("mid", None)

    def _on_window(self, step: Step):
        self.window = (step.payload["start"], step.payload["end"])
        self.window_sum = step.payload["sum"]
        self._mark([step.payload["added"]], "active")

    def _on_distribute(self, step: Step):
        digit = step.payload["digit"]
        if not self.buckets:
            self.buckets = [[] for _ in range(10)]
        self.buckets[digit].append(step.payload["value"])
        self._mark([step.payload["index"]], "active")

    def _on_collect(self, step: Step):
        self.values = np.array(list(step.payload["values"]))
        self.buckets = []

    def _on_found(self, step: Step):
        for key in ("index", "left", "right"):
            if key in step.payload:
                self.found.add(step.payload[key])
        self.finished = True

    def _on_finished(self, step: Step):
        self.finished = True

    def _on_done(self, step: Step):
        if step.get("sorted"):
            self.sorted_mask[:] = True
        if "best" in step.payload:
            self.best_window = (step.payload["start"], step.payload["end"])
        self.finished = True

    def classes(self, index: int) -> List[str]:
        """Class names of one slot."""
        names = set(self.transient.get(index, ()))
        if self.sorted_mask[index]:
            names.add("sorted")
        if index in self.found:
            names.add("found")
        if self.window is not None and self.window[0] <= index < self.window[1]:
            names.add("window")
        if "low" in self.pointers and not self.pointers["low"] <= index <= self.pointers["high"]:
            names.add("faded")
        return sorted(names)

    def snapshot(self) -> Dict[str, Any]:
        return {
            "values": self.values.tolist(),
            "classes": [self.classes(i) for i in range(len(self.values))],
            "pointers": dict(self.pointers),
            "window": self.window,
            "window_sum": self.window_sum,
            "best_window": self.best_window,
            "buckets": [list(bucket) for bucket in self.buckets],
            "status": self.status,
            "finished": self.finished,
        }
