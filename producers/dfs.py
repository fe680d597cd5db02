"""Depth-first search producer."""

from typing import Iterator, Optional, Tuple

from steps import Step, StepKind
from .graph_producer import GraphProducer
from .parsing import Graph


class DFSProducer(GraphProducer):
    """Iterative depth-first search with an explicit stack."""

    name = "dfs"
    title = "Depth-First Search"

    def generate(self, parsed: Tuple[Graph, Optional[str]]) -> Iterator[Step]:
        graph, start = parsed
        yield Step(StepKind.START, {"start": start}, f"Start DFS at {start}")

        order = []
        stack = [(start, None)]
        yield Step(StepKind.PUSH, {"node": start, "stack": [start]}, f"Push {start}")

        while stack:
            node, parent = stack.pop()
            stack_nodes = [n for n, _ in stack]
            if node in order:
                yield Step(StepKind.POP, {"node": node, "stack": stack_nodes, "skipped": True},
                           f"Pop {node} (already visited)")
                continue
            yield Step(StepKind.POP, {"node": node, "stack": stack_nodes}, f"Pop {node}")

            order.append(node)
            yield Step(StepKind.VISIT, {"node": node, "via": parent, "order": order},
                       f"Visit {node}")

            # Reverse so the first listed neighbor is explored first
            for neighbor in reversed(graph.adjacency[node]):
                if neighbor not in order:
                    stack.append((neighbor, node))
                    yield Step(StepKind.PUSH, {"node": neighbor, "from": node,
                                               "stack": [n for n, _ in stack]},
                               f"Push {neighbor}")

        yield Step(StepKind.DONE, {"order": order}, f"Visit order: {', '.join(order)}")
