"""AlgoPlay - a step-based algorithm playback engine."""

__version__ = "0.1.0"

from .config import PlaybackConfig
from .timer import IntervalTimer
from .cursor import PlaybackCursor
from .controller import PlaybackController, PlaybackState, ControlResult
from .algoplay import AlgoPlay, COMMANDS

__all__ = [
    'PlaybackConfig',
    'IntervalTimer',
    'PlaybackCursor',
    'PlaybackController',
    'PlaybackState',
    'ControlResult',
    'AlgoPlay',
    'COMMANDS',
]
