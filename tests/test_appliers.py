"""Visual applier tests: rendered classes and snapshots."""

import warnings

import pytest

from appliers import ArrayApplier, CompositeApplier, GraphApplier, TranscriptApplier
from producers import create_producer
from steps import Direction, Step, StepKind


def _render(applier, sequence, upto=None):
    applier.reset(sequence.initial)
    for step in sequence.prefix(len(sequence) if upto is None else upto):
        applier.apply(step)
    return applier.snapshot()


def test_array_applier_marks_compare_and_swap():
    sequence = create_producer("bubble_sort").produce("3 1 2")
    applier = ArrayApplier()

    snapshot = _render(applier, sequence, upto=2)
    assert sequence[1].kind is StepKind.COMPARE
    assert "comparing" in snapshot["classes"][0]
    assert "comparing" in snapshot["classes"][1]

    snapshot = _render(applier, sequence, upto=3)
    assert sequence[2].kind is StepKind.SWAP
    assert snapshot["values"] == [1, 3, 2]
    assert "swapping" in snapshot["classes"][0]
    # Transient classes only describe the latest step
    assert "comparing" not in snapshot["classes"][0]


def test_array_applier_final_state_is_sorted():
    sequence = create_producer("quick_sort").produce("9 4 7 1 8")
    snapshot = _render(ArrayApplier(), sequence)
    assert snapshot["values"] == [1, 4, 7, 8, 9]
    assert all("sorted" in classes for classes in snapshot["classes"])
    assert snapshot["finished"]
    assert snapshot["status"] == "Sorting complete"


def test_array_applier_binary_search_fades_outside_range():
    sequence = create_producer("binary_search").produce({"array": "1 3 5 7 9 11 13", "target": 11})
    applier = ArrayApplier()
    applier.reset(sequence.initial)
    steps = iter(sequence)
    for step in steps:
        applier.apply(step)
        if step.kind is StepKind.MOVE_POINTER:
            break

    snapshot = applier.snapshot()
    assert snapshot["pointers"] == {"low": 4, "high": 6}
    assert "faded" in snapshot["classes"][0]
    assert "faded" not in snapshot["classes"][5]

    for step in steps:
        applier.apply(step)
    assert "found" in applier.snapshot()["classes"][5]


def test_array_applier_radix_buckets():
    sequence = create_producer("radix_sort").produce("21 3 12")
    applier = ArrayApplier()
    applier.reset(sequence.initial)
    for step in sequence.prefix(4):
        applier.apply(step)
    assert applier.snapshot()["buckets"][1] == [21]
    assert applier.snapshot()["buckets"][2] == [12]

    applier.apply(sequence[4])
    assert sequence[4].kind is StepKind.COLLECT
    assert applier.snapshot()["buckets"] == []
    assert applier.snapshot()["values"] == [21, 12, 3]


def test_array_applier_sliding_window():
    sequence = create_producer("sliding_window").produce({"array": "2 1 5 1 3 2", "window": 3})
    snapshot = _render(ArrayApplier(), sequence)
    assert snapshot["best_window"] == (2, 5)
    assert snapshot["window"] == (3, 6)
    assert "window" in snapshot["classes"][4]


def test_array_applier_rejects_backward():
    applier = ArrayApplier()
    applier.reset({"array": [1]})
    with pytest.raises(NotImplementedError):
        applier.apply(Step(StepKind.START), Direction.BACKWARD)


def test_graph_applier_bfs_final_state():
    sequence = create_producer("bfs").produce({"edges": "A-B, A-C, B-D", "start": "A"})
    snapshot = _render(GraphApplier(), sequence)
    assert snapshot["order"] == ["A", "B", "C", "D"]
    assert all("visited" in classes for classes in snapshot["nodes"].values())
    assert "start" in snapshot["nodes"]["A"]
    assert snapshot["edges"]["A-B"] == ["tree"]
    assert snapshot["edges"]["B-D"] == ["tree"]
    assert snapshot["frontier"] == []
    assert snapshot["finished"]


def test_graph_applier_frontier_and_current():
    sequence = create_producer("dfs").produce({"edges": "A-B, A-C", "start": "A"})
    applier = GraphApplier()
    applier.reset(sequence.initial)
    for step in sequence.prefix(3):
        applier.apply(step)

    snapshot = applier.snapshot()
    assert sequence[2].kind is StepKind.POP
    assert snapshot["frontier"] == []
    applier.apply(sequence[3])
    assert "current" in applier.snapshot()["nodes"]["A"]


def test_graph_applier_topological_indegree():
    sequence = create_producer("topological_sort").produce({"edges": "A->B, B->C"})
    applier = GraphApplier()
    snapshot = _render(applier, sequence, upto=1)
    assert snapshot["indegree"] == {"A": 0, "B": 1, "C": 1}

    snapshot = _render(applier, sequence)
    assert snapshot["indegree"] == {"A": 0, "B": 0, "C": 0}
    assert snapshot["edges"]["A->B"] == ["removed"]
    assert not snapshot["cycle"]


def test_graph_applier_kruskal_edge_classes():
    sequence = create_producer("kruskal").produce({"edges": "A-B:1, B-C:2, A-C:3"})
    applier = GraphApplier()
    snapshot = _render(applier, sequence)
    assert snapshot["edges"]["A-B"] == ["selected"]
    assert snapshot["edges"]["B-C"] == ["selected"]
    assert snapshot["edges"]["A-C"] == []
    assert snapshot["total"] == 3

    # Edge under consideration is highlighted until the next step
    highlight = next(i for i, s in enumerate(sequence) if s.kind is StepKind.HIGHLIGHT)
    snapshot = _render(applier, sequence, upto=highlight + 1)
    assert "considered" in snapshot["edges"]["A-B"]


def test_graph_applier_prim_rejects_cycle_edge():
    sequence = create_producer("prim").produce({"edges": "A-B:1, B-C:2, A-C:3, C-D:4"})
    snapshot = _render(GraphApplier(), sequence)
    assert snapshot["edges"]["A-C"] == ["rejected"]
    assert snapshot["total"] == 7
    assert all("in-tree" in classes for classes in snapshot["nodes"].values())


def test_graph_applier_keeps_parallel_edges_apart():
    sequence = create_producer("kruskal").produce({"edges": "A-B:1, A-B:2, B-C:3"})
    snapshot = _render(GraphApplier(), sequence)
    assert snapshot["edges"] == {"A-B": ["selected"], "A-B #1": ["rejected"], "B-C": ["selected"]}
    assert snapshot["edge_ends"]["A-B #1"] == ("A", "B", False)
    assert snapshot["total"] == 4


def test_graph_applier_edge_ends_with_dashed_names():
    sequence = create_producer("dfs").produce({"edges": [("A-1", "B"), ("B", "C-2")], "start": "A-1"})
    snapshot = _render(GraphApplier(), sequence)
    assert snapshot["edge_ends"] == {"A-1-B": ("A-1", "B", False), "B-C-2": ("B", "C-2", False)}
    assert snapshot["edges"]["A-1-B"] == ["tree"]
    assert snapshot["order"] == ["A-1", "B", "C-2"]


def test_transcript_applier_undoes_steps():
    applier = TranscriptApplier()
    applier.reset({})
    applier.apply(Step(StepKind.START, message="Ready"))
    applier.apply(Step(StepKind.DONE))
    assert applier.snapshot() == {"lines": ["Ready", "done"]}

    applier.apply(Step(StepKind.DONE), Direction.BACKWARD)
    assert applier.snapshot() == {"lines": ["Ready"]}


def test_composite_applier_fans_out():
    array, transcript = ArrayApplier(), TranscriptApplier()
    composite = CompositeApplier(array, transcript)
    assert not composite.supports_inverse
    assert CompositeApplier(TranscriptApplier()).supports_inverse

    sequence = create_producer("insertion_sort").produce("2 1")
    snapshot = _render(composite, sequence)
    assert snapshot["0:ArrayApplier"]["values"] == [1, 2]
    assert snapshot["1:TranscriptApplier"]["lines"][-1] == "Sorting complete"


def test_unhandled_step_kind_warns_once():
    applier = ArrayApplier()
    applier.reset({"array": [1, 2]})
    with pytest.warns(RuntimeWarning, match="VISIT"):
        applier.apply(Step(StepKind.VISIT, {"node": "A"}, "Visit A"))
    assert applier.snapshot()["status"] == "Visit A"

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        applier.apply(Step(StepKind.VISIT, {"node": "B"}, "Visit B"))
