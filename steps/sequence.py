"""Ordered, deterministic list of steps for one playback run."""

from collections import Counter
from typing import Any, Dict, Iterable, Iterator, List, Optional

from .errors import StepSequenceError
from .step import Step, StepKind


class StepSequence:
    """
    Step sequence produced eagerly or lazily from a step producer.

    Lazy sequences pull steps from the producer only up to the highest index
    requested so far. The contract is checked as steps arrive: index 0 is a
    START marker, nothing follows a terminal step, and the last step is
    terminal.
    """

    def __init__(self, steps: Iterable[Step], initial: Optional[Dict[str, Any]] = None,
                 name: str = "", lazy: bool = False):
        """
        Initialize step sequence.

        Args:
            steps: Iterable of steps in production order
            initial: Structure rendered before any step is applied
            name: Name of the producing algorithm
            lazy: Pull steps on demand instead of materializing them now
        """
        self.initial = initial if initial is not None else {}
        self.name = name
        self.lazy = lazy

        self._source: Optional[Iterator[Step]] = iter(steps)
        self._steps: List[Step] = []

        if not lazy:
            self._fill()

    def _pull(self) -> bool:
        """Pull one step from the source. Returns False once exhausted."""
        if self._source is None:
            return False

        try:
            step = next(self._source)
        except StopIteration:
            self._source = None
            if not self._steps:
                raise StepSequenceError(f"{self.name or 'producer'} produced no steps")
            if not self._steps[-1].terminal:
                raise StepSequenceError(f"{self.name or 'producer'} ended without a terminal step")
            return False

        if not self._steps and step.kind is not StepKind.START:
            raise StepSequenceError(f"first step must be START, got {step.kind.name}")
        if self._steps and self._steps[-1].terminal:
            raise StepSequenceError(f"{step.kind.name} produced after terminal step")

        self._steps.append(step)
        if step.terminal:
            # Drain the source to surface steps produced after the terminal one
            self._pull()
        return True

    def _fill(self, upto: Optional[int] = None):
        """Materialize steps up to and including index `upto` (None = all)."""
        while upto is None or len(self._steps) <= upto:
            if not self._pull():
                break

    @property
    def materialized(self) -> int:
        """Number of steps produced so far."""
        return len(self._steps)

    @property
    def complete(self) -> bool:
        """True once the producer is exhausted."""
        return self._source is None

    def has(self, index: int) -> bool:
        """Check whether a step exists at index, producing up to it if needed."""
        if index < 0:
            return False
        self._fill(index)
        return index < len(self._steps)

    def __len__(self) -> int:
        self._fill()
        return len(self._steps)

    def __getitem__(self, index: int) -> Step:
        if index < 0:
            index += len(self)
        if not self.has(index):
            raise IndexError(f"step index {index} out of range")
        return self._steps[index]

    def __iter__(self) -> Iterator[Step]:
        index = 0
        while self.has(index):
            yield self._steps[index]
            index += 1

    def prefix(self, n: int) -> List[Step]:
        """Return steps [0, n)."""
        self._fill(n - 1)
        return list(self._steps[:max(0, n)])

    def kind_counts(self, n: Optional[int] = None) -> Counter:
        """Count step kinds in [0, n) (whole sequence if n is None)."""
        steps = self.prefix(n) if n is not None else list(self)
        return Counter(step.kind for step in steps)

    def __repr__(self) -> str:
        total = len(self._steps) if self.complete else f"{len(self._steps)}+"
        return f"StepSequence({self.name!r}, steps={total})"
