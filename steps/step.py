"""Step record: one atomic, renderable algorithm action."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional


class StepKind(Enum):
    """Kinds of algorithm actions."""
    START = "start"
    COMPARE = "compare"
    SWAP = "swap"
    OVERWRITE = "overwrite"
    MERGE = "merge"
    MARK_SORTED = "mark_sorted"
    HIGHLIGHT = "highlight"
    MOVE_POINTER = "move_pointer"
    WINDOW = "window"
    DISTRIBUTE = "distribute"
    COLLECT = "collect"
    VISIT = "visit"
    PUSH = "push"
    POP = "pop"
    ENQUEUE = "enqueue"
    DEQUEUE = "dequeue"
    REMOVE_EDGE = "remove_edge"
    SELECT_EDGE = "select_edge"
    REJECT_EDGE = "reject_edge"
    FOUND = "found"
    NOT_FOUND = "not_found"
    DONE = "done"


TERMINAL_KINDS = frozenset({StepKind.FOUND, StepKind.NOT_FOUND, StepKind.DONE})


class Direction(Enum):
    """Direction in which a step is handed to a visual applier."""
    FORWARD = "forward"
    BACKWARD = "backward"


def freeze(value: Any) -> Any:
    """Recursively convert dicts to read-only mappings and lists to tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(freeze(item) for item in value)
    return value


def _hash_key(value: Any) -> Any:
    """Hashable stand-in for a frozen payload value."""
    if isinstance(value, Mapping):
        return frozenset((key, _hash_key(item)) for key, item in value.items())
    if isinstance(value, tuple):
        return tuple(_hash_key(item) for item in value)
    return value


@dataclass(frozen=True)
class Step:
    """
    Immutable description of one algorithm action.

    Attributes:
        kind: What happened
        payload: Kind-specific data (indices, values, node ids), frozen on creation
        message: Human readable status line for the step
        terminal: True for the final step of a sequence (defaults from kind)
    """
    kind: StepKind
    payload: Mapping[str, Any] = field(default_factory=dict)
    message: str = ""
    terminal: Optional[bool] = None

    def __post_init__(self):
        object.__setattr__(self, 'payload', freeze(self.payload))
        if self.terminal is None:
            object.__setattr__(self, 'terminal', self.kind in TERMINAL_KINDS)

    def get(self, key: str, default: Any = None) -> Any:
        """Shorthand for payload lookup."""
        return self.payload.get(key, default)

    def __hash__(self) -> int:
        return hash((self.kind, _hash_key(self.payload), self.message, self.terminal))

    def __repr__(self) -> str:
        return f"Step({self.kind.name}, {dict(self.payload)!r})"
