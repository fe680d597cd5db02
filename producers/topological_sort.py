"""Topological sort (Kahn's algorithm) producer."""

from typing import Iterator, Optional, Tuple

from steps import Step, StepKind
from steps.errors import ValidationError, DIRECTED_EDGES_REQUIRED
from .graph_producer import GraphProducer
from .parsing import Graph


class TopologicalSortProducer(GraphProducer):
    """Kahn's algorithm; reports a cycle when some nodes never reach in-degree 0."""

    name = "topological_sort"
    title = "Topological Sort (Kahn's Algorithm)"
    requires_start = False

    def check_graph(self, graph: Graph):
        if not graph.directed:
            raise ValidationError(DIRECTED_EDGES_REQUIRED)

    def generate(self, parsed: Tuple[Graph, Optional[str]]) -> Iterator[Step]:
        graph, _ = parsed
        indegree = {node: 0 for node in graph.nodes}
        for node in graph.nodes:
            for neighbor in graph.adjacency[node]:
                indegree[neighbor] += 1
        yield Step(StepKind.START, {"indegree": indegree}, "Compute in-degrees")

        queue = []
        for node in graph.nodes:
            if indegree[node] == 0:
                queue.append(node)
                yield Step(StepKind.ENQUEUE, {"node": node, "queue": queue},
                           f"Enqueue {node} (in-degree 0)")

        order = []
        while queue:
            node = queue.pop(0)
            yield Step(StepKind.DEQUEUE, {"node": node, "queue": queue}, f"Dequeue {node}")
            order.append(node)
            yield Step(StepKind.VISIT, {"node": node, "via": None, "order": order},
                       f"Append {node} to order")
            for neighbor in graph.adjacency[node]:
                indegree[neighbor] -= 1
                yield Step(StepKind.REMOVE_EDGE,
                           {"edge": (node, neighbor), "node": neighbor, "indegree": indegree[neighbor]},
                           f"Remove edge {node}->{neighbor}; in-degree({neighbor}) = {indegree[neighbor]}")
                if indegree[neighbor] == 0:
                    queue.append(neighbor)
                    yield Step(StepKind.ENQUEUE, {"node": neighbor, "queue": queue},
                               f"Enqueue {neighbor} (in-degree 0)")

        if len(order) < len(graph.nodes):
            remaining = [node for node in graph.nodes if node not in order]
            yield Step(StepKind.DONE, {"order": order, "cycle": True, "remaining": remaining},
                       f"Cycle detected among {', '.join(remaining)}: no topological order")
        else:
            yield Step(StepKind.DONE, {"order": order, "cycle": False},
                       f"Topological order: {', '.join(order)}")
