"""Shared base for graph producers."""

from typing import Any, Dict, Optional, Tuple

from steps.errors import ValidationError, INVALID_START
from .base_producer import BaseProducer
from .parsing import Graph, parse_edges


class GraphProducer(BaseProducer):
    """Graph producer taking an edge list and an optional start node."""

    fields = ("edges", "start", "nodes")
    requires_start = True

    def parse(self, fields: Dict[str, Any]) -> Tuple[Graph, Optional[str]]:
        graph = parse_edges(fields["edges"], fields.get("nodes"))
        self.check_graph(graph)

        start = fields.get("start")
        if start is None or str(start).strip() == "":
            if self.requires_start:
                raise ValidationError(INVALID_START)
            return graph, graph.nodes[0]
        start = str(start).strip()
        if start not in graph.adjacency:
            raise ValidationError(INVALID_START)
        return graph, start

    def check_graph(self, graph: Graph):
        """Hook for producer-specific graph requirements."""
        pass

    def initial_state(self, parsed: Tuple[Graph, Optional[str]]) -> Dict[str, Any]:
        graph, start = parsed
        initial = graph.to_initial()
        initial["start"] = start
        return initial
