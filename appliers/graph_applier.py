"""Graph applier: node/edge state for traversal, ordering and MST visualizations."""

from typing import Any, Callable, Dict, List, Optional, Set

from steps import Step, StepKind, Direction
from .base_applier import VisualApplier


class GraphApplier(VisualApplier):
    """Rendered state of a graph visualization."""

    def __init__(self):
        self.nodes: List[str] = []
        self.edges: List[tuple] = []
        self.edge_labels: List[str] = []
        self.node_classes: Dict[str, Set[str]] = {}
        self.edge_classes: Dict[str, Set[str]] = {}
        self.considered: Optional[str] = None
        self.current: Optional[str] = None
        self.order: List[str] = []
        self.frontier: List[str] = []
        self.indegree: Dict[str, int] = {}
        self.total = None
        self.cycle = False
        self.status = ""
        self.finished = False

        self._handlers: Dict[StepKind, Callable[[Step], None]] = {
            StepKind.START: self._on_start,
            StepKind.PUSH: self._on_frontier,
            StepKind.POP: self._on_frontier,
            StepKind.ENQUEUE: self._on_frontier,
            StepKind.DEQUEUE: self._on_frontier,
            StepKind.VISIT: self._on_visit,
            StepKind.REMOVE_EDGE: self._on_remove_edge,
            StepKind.HIGHLIGHT: self._on_highlight,
            StepKind.SELECT_EDGE: self._on_select_edge,
            StepKind.REJECT_EDGE: self._on_reject_edge,
            StepKind.DONE: self._on_done,
        }

    def reset(self, initial: Dict[str, Any]):
        self.nodes = list(initial.get("nodes", []))
        self.edges = [tuple(edge) for edge in initial.get("edges", [])]
        self.edge_labels = []
        for index, (a, b, _, directed) in enumerate(self.edges):
            label = f"{a}->{b}" if directed else f"{a}-{b}"
            if label in self.edge_labels:
                label = f"{label} #{index}"  # parallel edge
            self.edge_labels.append(label)
        self.node_classes = {node: set() for node in self.nodes}
        self.edge_classes = {label: set() for label in self.edge_labels}
        self.considered = None
        self.current = None
        self.order = []
        self.frontier = []
        self.indegree = {}
        self.total = None
        self.cycle = False
        self.status = ""
        self.finished = False

    def edge_key(self, u: str, v: str, index: Optional[int] = None) -> str:
        """
        Label of an input edge.

        Args:
            u, v: Endpoints named by the step
            index: Position in the input edge list; without it the first
                edge joining u and v is used
        """
        if index is not None:
            return self.edge_labels[index]
        for label, (a, b, _, directed) in zip(self.edge_labels, self.edges):
            if (a, b) == (u, v) or (not directed and (b, a) == (u, v)):
                return label
        return f"{u}-{v}"

    def apply(self, step: Step, direction: Direction = Direction.FORWARD):
        if direction is not Direction.FORWARD:
            raise NotImplementedError("GraphApplier re-renders from the step prefix instead of undoing")
        self.considered = None
        handler = self._handlers.get(step.kind)
        if handler is not None:
            handler(step)
        else:
            self._warn_unhandled(step)
        self.status = step.message

    def _add_edge_class(self, edge, name: str, index: Optional[int] = None):
        key = self.edge_key(*edge, index=index)
        self.edge_classes.setdefault(key, set()).add(name)

    def _on_start(self, step: Step):
        if "indegree" in step.payload:
            self.indegree = dict(step.payload["indegree"])
        if "start" in step.payload:
            self.node_classes[step.payload["start"]].add("start")

    def _on_frontier(self, step: Step):
        """Stack or queue changed: keep frontier membership classes in sync."""
        frontier = step.get("stack", step.get("queue", ()))
        self.frontier = list(frontier)
        name = "stacked" if step.kind in (StepKind.PUSH, StepKind.POP) else "queued"
        for node, classes in self.node_classes.items():
            if node in self.frontier:
                classes.add(name)
            else:
                classes.discard(name)

    def _on_visit(self, step: Step):
        node = step.payload["node"]
        self.node_classes[node].add("visited")
        self.current = node
        self.order = list(step.payload["order"])
        if step.get("via") is not None:
            self._add_edge_class((step.payload["via"], node), "tree")

    def _on_remove_edge(self, step: Step):
        self._add_edge_class(step.payload["edge"], "removed")
        self.indegree[step.payload["node"]] = step.payload["indegree"]

    def _on_highlight(self, step: Step):
        if "edge" in step.payload:
            self.considered = self.edge_key(*step.payload["edge"], index=step.get("edge_index"))

    def _on_select_edge(self, step: Step):
        u, v = step.payload["edge"]
        self._add_edge_class((u, v), "selected", step.get("edge_index"))
        self.node_classes[u].add("in-tree")
        self.node_classes[v].add("in-tree")
        self.total = step.payload["total"]
        if "order" in step.payload:
            self.order = list(step.payload["order"])

    def _on_reject_edge(self, step: Step):
        self._add_edge_class(step.payload["edge"], "rejected", step.get("edge_index"))

    def _on_done(self, step: Step):
        self.finished = True
        self.current = None
        self.cycle = bool(step.get("cycle", False))
        if "order" in step.payload:
            self.order = list(step.payload["order"])
        if "total" in step.payload:
            self.total = step.payload["total"]

    def snapshot(self) -> Dict[str, Any]:
        nodes = {}
        for node in self.nodes:
            classes = set(self.node_classes[node])
            if node == self.current:
                classes.add("current")
            nodes[node] = sorted(classes)
        edges = {}
        for key, classes in self.edge_classes.items():
            classes = set(classes)
            if key == self.considered:
                classes.add("considered")
            edges[key] = sorted(classes)
        return {
            "nodes": nodes,
            "edges": edges,
            "edge_ends": {label: (a, b, directed)
                          for label, (a, b, _, directed) in zip(self.edge_labels, self.edges)},
            "order": list(self.order),
            "frontier": list(self.frontier),
            "indegree": dict(self.indegree),
            "total": self.total,
            "cycle": self.cycle,
            "status": self.status,
            "finished": self.finished,
        }
