"""Playback cursor: position within a step sequence."""

from typing import Optional

from appliers import VisualApplier
from steps import Direction, Step, StepSequence


class PlaybackCursor:
    """
    Tracks how many steps of a sequence are applied to a visual applier.

    The rendered state is always "steps [0, position) applied in order".
    Moving backward either re-renders the prefix from the initial structure
    ("recompute") or undoes steps one by one ("inverse"); the strategy is
    fixed per cursor.
    """

    def __init__(self, sequence: StepSequence, applier: VisualApplier,
                 strategy: str = "recompute"):
        """
        Initialize cursor and render the initial state.

        Args:
            sequence: Step sequence to navigate
            applier: Visual applier receiving the steps
            strategy: "recompute" or "inverse"
        """
        if strategy not in ("recompute", "inverse"):
            raise ValueError(f"Unknown backward strategy: {strategy}")
        if strategy == "inverse" and not applier.supports_inverse:
            raise ValueError(f"{applier.__class__.__name__} cannot undo steps; use the recompute strategy")

        self.sequence = sequence
        self.applier = applier
        self.strategy = strategy
        self.position = 0

        self.applier.reset(self.sequence.initial)

    @property
    def length(self) -> int:
        return len(self.sequence)

    @property
    def at_start(self) -> bool:
        return self.position == 0

    @property
    def at_end(self) -> bool:
        return not self.sequence.has(self.position)

    @property
    def current_step(self) -> Optional[Step]:
        """Most recently applied step, None at position 0."""
        return self.sequence[self.position - 1] if self.position > 0 else None

    def step_forward(self) -> Optional[Step]:
        """
        Apply the next step.

        Returns:
            The applied step, or None when already at the end
        """
        if self.at_end:
            return None
        step = self.sequence[self.position]
        self.applier.apply(step, Direction.FORWARD)
        self.position += 1
        return step

    def step_backward(self) -> bool:
        """
        Undo the last applied step.

        Returns:
            False when already at position 0
        """
        if self.at_start:
            return False
        self._move_back_to(self.position - 1)
        return True

    def seek(self, target: int) -> bool:
        """
        Move directly to a position, clamped to [0, length].

        Returns:
            True if the position changed
        """
        target = max(0, target)
        if target < self.position:
            self._move_back_to(target)
            return True

        moved = False
        while self.position < target and self.step_forward() is not None:
            moved = True
        return moved

    def reset(self):
        """Return to position 0 and re-render the initial state."""
        self.position = 0
        self.applier.reset(self.sequence.initial)

    def _move_back_to(self, target: int):
        if self.strategy == "inverse":
            while self.position > target:
                self.position -= 1
                self.applier.apply(self.sequence[self.position], Direction.BACKWARD)
            return

        self.applier.reset(self.sequence.initial)
        for step in self.sequence.prefix(target):
            self.applier.apply(step, Direction.FORWARD)
        self.position = target
