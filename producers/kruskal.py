"""Kruskal's minimum spanning tree producer."""

from typing import Dict, Iterator, Optional, Tuple

from steps import Step, StepKind
from steps.errors import ValidationError, WEIGHTED_EDGES_REQUIRED
from .graph_producer import GraphProducer
from .parsing import Graph


def check_weighted_undirected(graph: Graph):
    """MST producers need weights on every edge and no directed edges."""
    if not graph.weighted or any(directed for _, _, _, directed in graph.edges):
        raise ValidationError(WEIGHTED_EDGES_REQUIRED)


class KruskalProducer(GraphProducer):
    """Kruskal's algorithm with a union-find forest."""

    name = "kruskal"
    title = "Kruskal's Algorithm"
    requires_start = False

    def check_graph(self, graph: Graph):
        check_weighted_undirected(graph)

    def generate(self, parsed: Tuple[Graph, Optional[str]]) -> Iterator[Step]:
        graph, _ = parsed
        # (u, v, weight, index into the input edge list)
        edges = sorted(
            ((u, v, w, index) for index, (u, v, w, _) in enumerate(graph.edges)),
            key=lambda edge: edge[2],
        )
        yield Step(StepKind.START, {"edges": [edge[:3] for edge in edges]}, "Sort edges by weight")

        parent: Dict[str, str] = {node: node for node in graph.nodes}

        def find(node: str) -> str:
            while parent[node] != node:
                parent[node] = parent[parent[node]]
                node = parent[node]
            return node

        selected = []
        total = 0
        for u, v, weight, index in edges:
            if len(selected) == len(graph.nodes) - 1:
                break
            yield Step(StepKind.HIGHLIGHT, {"edge": (u, v), "edge_index": index, "weight": weight},
                       f"Consider {u}-{v} ({weight})")
            root_u, root_v = find(u), find(v)
            if root_u == root_v:
                yield Step(StepKind.REJECT_EDGE, {"edge": (u, v), "edge_index": index, "weight": weight},
                           f"{u}-{v} would form a cycle")
                continue
            parent[root_v] = root_u
            selected.append((u, v, weight))
            total += weight
            yield Step(StepKind.SELECT_EDGE,
                       {"edge": (u, v), "edge_index": index, "weight": weight, "total": total},
                       f"Add {u}-{v} ({weight}); total = {total}")

        connected = len(selected) == len(graph.nodes) - 1
        message = (f"MST total weight: {total}" if connected
                   else f"Graph is disconnected: spanning forest weight {total}")
        yield Step(StepKind.DONE, {"total": total, "edges": selected, "connected": connected}, message)
