"""Step records and step sequences for algorithm playback."""

from .step import Step, StepKind, Direction, TERMINAL_KINDS
from .sequence import StepSequence
from .errors import ValidationError, StepSequenceError

__all__ = [
    'Step',
    'StepKind',
    'Direction',
    'TERMINAL_KINDS',
    'StepSequence',
    'ValidationError',
    'StepSequenceError',
]
