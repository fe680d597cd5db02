"""Prim's minimum spanning tree producer."""

import heapq
from typing import Dict, Iterator, List, Optional, Tuple

from steps import Step, StepKind
from .graph_producer import GraphProducer
from .kruskal import check_weighted_undirected
from .parsing import Graph


class PrimProducer(GraphProducer):
    """Prim's algorithm grown from a start node (first node by default)."""

    name = "prim"
    title = "Prim's Algorithm"
    requires_start = False

    def check_graph(self, graph: Graph):
        check_weighted_undirected(graph)

    def generate(self, parsed: Tuple[Graph, Optional[str]]) -> Iterator[Step]:
        graph, start = parsed
        incident: Dict[str, List[Tuple[str, float, int]]] = {node: [] for node in graph.nodes}
        for index, (u, v, weight, _) in enumerate(graph.edges):
            incident[u].append((v, weight, index))
            incident[v].append((u, weight, index))

        yield Step(StepKind.START, {"start": start}, f"Start Prim at {start}")

        in_tree = [start]
        yield Step(StepKind.VISIT, {"node": start, "via": None, "order": in_tree},
                   f"Add {start} to the tree")

        heap = []
        counter = 0
        for neighbor, weight, index in incident[start]:
            heapq.heappush(heap, (weight, counter, start, neighbor, index))
            counter += 1

        selected = []
        total = 0
        while heap and len(in_tree) < len(graph.nodes):
            weight, _, u, v, index = heapq.heappop(heap)
            if v in in_tree:
                yield Step(StepKind.REJECT_EDGE, {"edge": (u, v), "edge_index": index, "weight": weight},
                           f"{u}-{v} would form a cycle")
                continue
            in_tree.append(v)
            selected.append((u, v, weight))
            total += weight
            yield Step(StepKind.SELECT_EDGE,
                       {"edge": (u, v), "edge_index": index, "weight": weight, "total": total,
                        "node": v, "order": in_tree},
                       f"Add {u}-{v} ({weight}); total = {total}")
            for neighbor, edge_weight, edge_index in incident[v]:
                if neighbor not in in_tree:
                    heapq.heappush(heap, (edge_weight, counter, v, neighbor, edge_index))
                    counter += 1

        connected = len(in_tree) == len(graph.nodes)
        message = (f"MST total weight: {total}" if connected
                   else f"Graph is disconnected: tree spans {len(in_tree)} of {len(graph.nodes)} nodes")
        yield Step(StepKind.DONE, {"total": total, "edges": selected, "connected": connected}, message)
