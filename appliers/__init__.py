"""Visual appliers: render the effect of steps onto an inspectable state."""

from .base_applier import VisualApplier, CompositeApplier
from .array_applier import ArrayApplier
from .graph_applier import GraphApplier
from .transcript_applier import TranscriptApplier

__all__ = [
    'VisualApplier',
    'CompositeApplier',
    'ArrayApplier',
    'GraphApplier',
    'TranscriptApplier',
]
