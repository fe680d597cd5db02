"""Input parsing shared by step producers."""

import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from algoplay.config import PlaybackConfig
from steps.errors import (
    ValidationError,
    INVALID_ARRAY,
    ARRAY_TOO_LARGE,
    INVALID_EDGES,
    INVALID_SIZE,
)

_TOKEN_SPLIT = re.compile(r"[,\s]+")
_EDGE_SPLIT = re.compile(r"[,;\n]+")
_EDGE_PATTERN = re.compile(
    r"^\s*(?P<u>[^\s\-<>:]+)\s*(?P<arrow>->|>|-)\s*(?P<v>[^\s\-<>:]+)\s*(?::\s*(?P<w>[^\s]+))?\s*$"
)


def _to_number(token: Any):
    """Convert a token to int or float, or None if it is not a finite number."""
    if isinstance(token, bool):
        return None
    if isinstance(token, (int, np.integer)):
        return int(token)
    if isinstance(token, (float, np.floating)):
        value = float(token)
        if not math.isfinite(value):
            return None
        return int(value) if value.is_integer() else value
    if not isinstance(token, str):
        return None

    text = token.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value


def parse_numbers(raw: Any, config: PlaybackConfig) -> List:
    """
    Parse an array of numbers from text ("5, 3 8") or a sequence.

    Args:
        raw: Raw field value
        config: Configuration providing the size bound

    Returns:
        List of ints/floats

    Raises:
        ValidationError: empty input, non-numeric tokens or too many values
    """
    if raw is None:
        raise ValidationError(INVALID_ARRAY)

    if isinstance(raw, str):
        tokens = [t for t in _TOKEN_SPLIT.split(raw.strip()) if t]
    else:
        try:
            tokens = list(raw)
        except TypeError:
            raise ValidationError(INVALID_ARRAY)

    if not tokens:
        raise ValidationError(INVALID_ARRAY)

    values = []
    for token in tokens:
        value = _to_number(token)
        if value is None:
            raise ValidationError(INVALID_ARRAY)
        values.append(value)

    if len(values) > config.max_array_size:
        raise ValidationError(ARRAY_TOO_LARGE.format(max=config.max_array_size))

    return values


def parse_number(raw: Any, message: str):
    """Parse a single number, raising ValidationError(message) otherwise."""
    if raw is None:
        raise ValidationError(message)
    value = _to_number(raw)
    if value is None:
        raise ValidationError(message)
    return value


def parse_int(raw: Any, message: str) -> int:
    """Parse a single integer, raising ValidationError(message) otherwise."""
    value = parse_number(raw, message)
    if not isinstance(value, int):
        raise ValidationError(message)
    return value


@dataclass
class Graph:
    """Parsed graph input with insertion-ordered nodes and adjacency."""
    nodes: List[str] = field(default_factory=list)
    edges: List[Tuple[str, str, Optional[float], bool]] = field(default_factory=list)  # (u, v, weight, directed)
    adjacency: Dict[str, List[str]] = field(default_factory=dict)

    def add_node(self, node: str):
        if node not in self.adjacency:
            self.nodes.append(node)
            self.adjacency[node] = []

    def add_edge(self, u: str, v: str, weight: Optional[float], directed: bool):
        self.add_node(u)
        self.add_node(v)
        self.edges.append((u, v, weight, directed))
        if v not in self.adjacency[u]:
            self.adjacency[u].append(v)
        if not directed and u not in self.adjacency[v]:
            self.adjacency[v].append(u)

    @property
    def directed(self) -> bool:
        return bool(self.edges) and all(edge[3] for edge in self.edges)

    @property
    def weighted(self) -> bool:
        return bool(self.edges) and all(edge[2] is not None for edge in self.edges)

    def to_initial(self) -> Dict[str, Any]:
        """Structure rendered before any step is applied."""
        return {
            "nodes": list(self.nodes),
            "edges": [list(edge) for edge in self.edges],
        }


def parse_edges(raw: Any, nodes: Any = None) -> Graph:
    """
    Parse an edge list such as "A-B, B->C, C-D:4".

    "-" is an undirected edge, "->" (or ">") a directed one, and an optional
    ":weight" suffix gives the edge weight. `nodes` may list extra isolated nodes.
    """
    graph = Graph()

    if isinstance(raw, str):
        tokens = [t.strip() for t in _EDGE_SPLIT.split(raw) if t.strip()]
    elif raw is None:
        tokens = []
    else:
        tokens = list(raw)

    if not tokens:
        raise ValidationError(INVALID_EDGES)

    for token in tokens:
        if isinstance(token, (tuple, list)):
            if len(token) not in (2, 3):
                raise ValidationError(INVALID_EDGES)
            u, v = str(token[0]), str(token[1])
            weight = parse_number(token[2], INVALID_EDGES) if len(token) == 3 else None
            directed = False
        else:
            match = _EDGE_PATTERN.match(str(token))
            if match is None:
                raise ValidationError(INVALID_EDGES)
            u, v = match.group('u'), match.group('v')
            directed = match.group('arrow') != '-'
            weight = parse_number(match.group('w'), INVALID_EDGES) if match.group('w') else None
        if u == v:
            raise ValidationError(INVALID_EDGES)
        graph.add_edge(u, v, weight, directed)

    if nodes:
        extra = nodes.split(",") if isinstance(nodes, str) else nodes
        for node in extra:
            node = str(node).strip()
            if node:
                graph.add_node(node)

    return graph


def generate_array(size: Any, config: PlaybackConfig, sorted_values: bool = False,
                   seed: Optional[int] = None) -> List[int]:
    """
    Generate a random array of integers for the "Generate" button.

    Args:
        size: Number of elements (validated against the configured bounds)
        config: Configuration object
        sorted_values: Return the values in ascending order (searches need this)
        seed: Optional RNG seed for reproducible arrays

    Returns:
        List of ints in [1, config.random_value_max]
    """
    message = INVALID_SIZE.format(min=config.min_random_size, max=config.max_random_size)
    count = parse_int(size, message)
    if not config.min_random_size <= count <= config.max_random_size:
        raise ValidationError(message)

    rng = np.random.default_rng(seed)
    values = rng.integers(1, config.random_value_max + 1, size=count)
    if sorted_values:
        values = np.sort(values)
    return values.tolist()
