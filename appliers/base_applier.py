"""Base visual applier interface."""

import warnings
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from steps import Step, Direction


class VisualApplier(ABC):
    """
    Base class for visual appliers.

    The playback engine calls `reset` with the sequence's initial structure
    and then `apply` once per step. Appliers that can undo a step in place set
    `supports_inverse` and handle Direction.BACKWARD.
    """

    supports_inverse = False

    @abstractmethod
    def reset(self, initial: Dict[str, Any]):
        """
        Render the pre-algorithm state.

        Args:
            initial: Initial structure of the step sequence
        """
        pass

    @abstractmethod
    def apply(self, step: Step, direction: Direction = Direction.FORWARD):
        """
        Render the effect of one step.

        Args:
            step: Step to apply
            direction: FORWARD to apply, BACKWARD to undo
        """
        pass

    @abstractmethod
    def snapshot(self) -> Dict[str, Any]:
        """Return the rendered state as plain, comparable data."""
        pass

    def _warn_unhandled(self, step: Step):
        """Warn once per step kind this applier has no rendering for."""
        warned = self.__dict__.setdefault("_warned_kinds", set())
        if step.kind in warned:
            return
        warnings.warn(
            f"{self.__class__.__name__} has no rendering for {step.kind.name} steps; "
            "only the status message is shown.",
            RuntimeWarning,
            stacklevel=3
        )
        warned.add(step.kind)


class CompositeApplier(VisualApplier):
    """Fans every call out to several appliers."""

    def __init__(self, *appliers: VisualApplier):
        self.appliers: List[VisualApplier] = list(appliers)

    @property
    def supports_inverse(self) -> bool:
        return all(applier.supports_inverse for applier in self.appliers)

    def reset(self, initial: Dict[str, Any]):
        for applier in self.appliers:
            applier.reset(initial)

    def apply(self, step: Step, direction: Direction = Direction.FORWARD):
        for applier in self.appliers:
            applier.apply(step, direction)

    def snapshot(self) -> Dict[str, Any]:
        return {
            f"{index}:{applier.__class__.__name__}": applier.snapshot()
            for index, applier in enumerate(self.appliers)
        }
