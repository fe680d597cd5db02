"""Step producers for the supported algorithms."""

from typing import Dict, Optional, Type

from algoplay.config import PlaybackConfig
from .base_producer import BaseProducer
from .sort_producer import SortProducer
from .graph_producer import GraphProducer
from .bubble_sort import BubbleSortProducer
from .selection_sort import SelectionSortProducer
from .insertion_sort import InsertionSortProducer
from .heap_sort import HeapSortProducer
from .merge_sort import MergeSortProducer
from .quick_sort import QuickSortProducer
from .radix_sort import RadixSortProducer
from .binary_search import BinarySearchProducer
from .two_pointers import TwoPointersProducer
from .sliding_window import SlidingWindowProducer
from .dfs import DFSProducer
from .bfs import BFSProducer
from .topological_sort import TopologicalSortProducer
from .kruskal import KruskalProducer
from .prim import PrimProducer
from .parsing import generate_array

PRODUCERS: Dict[str, Type[BaseProducer]] = {
    producer.name: producer
    for producer in (
        BubbleSortProducer,
        SelectionSortProducer,
        InsertionSortProducer,
        HeapSortProducer,
        MergeSortProducer,
        QuickSortProducer,
        RadixSortProducer,
        BinarySearchProducer,
        TwoPointersProducer,
        SlidingWindowProducer,
        DFSProducer,
        BFSProducer,
        TopologicalSortProducer,
        KruskalProducer,
        PrimProducer,
    )
}


def create_producer(name: str, config: Optional[PlaybackConfig] = None) -> BaseProducer:
    """
    Create a producer by registry name.

    Args:
        name: Algorithm name, e.g. 'heap_sort'
        config: Configuration object

    Returns:
        Producer instance
    """
    try:
        producer_class = PRODUCERS[name]
    except KeyError:
        raise ValueError(f"Unknown algorithm: {name} (expected one of {', '.join(sorted(PRODUCERS))})")
    return producer_class(config)


__all__ = [
    'BaseProducer',
    'SortProducer',
    'GraphProducer',
    'BubbleSortProducer',
    'SelectionSortProducer',
    'InsertionSortProducer',
    'HeapSortProducer',
    'MergeSortProducer',
    'QuickSortProducer',
    'RadixSortProducer',
    'BinarySearchProducer',
    'TwoPointersProducer',
    'SlidingWindowProducer',
    'DFSProducer',
    'BFSProducer',
    'TopologicalSortProducer',
    'KruskalProducer',
    'PrimProducer',
    'PRODUCERS',
    'create_producer',
    'generate_array',
]
