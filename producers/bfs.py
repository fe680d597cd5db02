"""Breadth-first search producer."""

from typing import Iterator, Optional, Tuple

from steps import Step, StepKind
from .graph_producer import GraphProducer
from .parsing import Graph


class BFSProducer(GraphProducer):
    """Breadth-first search; nodes are marked discovered when enqueued."""

    name = "bfs"
    title = "Breadth-First Search"

    def generate(self, parsed: Tuple[Graph, Optional[str]]) -> Iterator[Step]:
        graph, start = parsed
        yield Step(StepKind.START, {"start": start}, f"Start BFS at {start}")

        order = []
        discovered = {start}
        queue = [(start, None)]
        yield Step(StepKind.ENQUEUE, {"node": start, "queue": [start]}, f"Enqueue {start}")

        while queue:
            node, parent = queue.pop(0)
            yield Step(StepKind.DEQUEUE, {"node": node, "queue": [n for n, _ in queue]},
                       f"Dequeue {node}")
            order.append(node)
            yield Step(StepKind.VISIT, {"node": node, "via": parent, "order": order},
                       f"Visit {node}")
            for neighbor in graph.adjacency[node]:
                if neighbor not in discovered:
                    discovered.add(neighbor)
                    queue.append((neighbor, node))
                    yield Step(StepKind.ENQUEUE, {"node": neighbor, "from": node,
                                                  "queue": [n for n, _ in queue]},
                               f"Enqueue {neighbor}")

        yield Step(StepKind.DONE, {"order": order}, f"Visit order: {', '.join(order)}")
