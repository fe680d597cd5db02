"""Transcript applier: the textual log of applied steps."""

from typing import Any, Dict, List

from steps import Step, Direction
from .base_applier import VisualApplier


class TranscriptApplier(VisualApplier):
    """Keeps one log line per applied step; undo drops the last line."""

    supports_inverse = True

    def __init__(self):
        self.lines: List[str] = []

    def reset(self, initial: Dict[str, Any]):
        self.lines = []

    def apply(self, step: Step, direction: Direction = Direction.FORWARD):
        if direction is Direction.FORWARD:
            self.lines.append(step.message or step.kind.value)
        elif self.lines:
            self.lines.pop()

    def snapshot(self) -> Dict[str, Any]:
        return {"lines": list(self.lines)}
