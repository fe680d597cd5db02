"""Step producer tests: final results, step contracts and input validation."""

import itertools
import math

import pytest

from algoplay.config import PlaybackConfig
from producers import PRODUCERS, create_producer, generate_array
from steps import StepKind, ValidationError
from steps import errors

SORTS = ["bubble_sort", "selection_sort", "insertion_sort", "heap_sort",
         "merge_sort", "quick_sort", "radix_sort"]
UNDIRECTED = "A-B, A-C, B-D, C-D, D-E"
WEIGHTED = "A-B:4, A-C:2, B-C:1, B-D:5, C-D:8, D-E:3"


def _produce(name, raw_input, **config):
    return create_producer(name, PlaybackConfig(**config)).produce(raw_input)


def _message(name, raw_input):
    with pytest.raises(ValidationError) as info:
        _produce(name, raw_input)
    return info.value.message


@pytest.mark.parametrize("name", SORTS)
def test_sorts_end_sorted(name):
    values = [29, 3, 71, 3, 15, 8, 42, 0]
    sequence = _produce(name, values)

    assert sequence[0].kind is StepKind.START
    assert sequence[-1].kind is StepKind.DONE
    assert list(sequence[-1].payload["array"]) == sorted(values)
    assert sequence.initial == {"array": values}


@pytest.mark.parametrize("name", SORTS)
def test_sorts_are_deterministic(name):
    first = [(s.kind, dict(s.payload)) for s in _produce(name, "5 1 4 2 3")]
    second = [(s.kind, dict(s.payload)) for s in _produce(name, "5 1 4 2 3")]
    assert first == second


def test_heap_sort_step_count_within_n_log_n():
    producer = create_producer("heap_sort")
    longest = max(len(producer.produce(list(values))) for values in itertools.permutations(range(1, 9)))
    assert longest <= 8 * math.log2(8)


def test_heap_sort_folds_extraction_into_first_sift():
    sequence = _produce("heap_sort", [5, 6, 2, 7, 4, 1, 3, 8])
    rotations = [s for s in sequence if s.kind is StepKind.SWAP and len(s.payload["indices"]) == 3]
    assert rotations
    for step in rotations:
        first, _, end = step.payload["indices"]
        assert first == 0 and step.payload["sorted"] == (end,)


def test_binary_search_found_scenario():
    sequence = _produce("binary_search", {"array": "1,3,5,7,9,11,13", "target": 7})
    assert [s.kind for s in sequence] == [StepKind.START, StepKind.COMPARE, StepKind.FOUND]
    assert sequence[-1].payload["index"] == 3
    assert sequence[-1].message == "Found at index 3"


def test_binary_search_not_found():
    sequence = _produce("binary_search", {"array": [1, 3, 5], "target": 4})
    assert sequence[-1].kind is StepKind.NOT_FOUND
    assert sequence[-1].message == "Not found: 4."


def test_two_pointers_pair():
    sequence = _produce("two_pointers", {"array": "1 2 4 7 11 15", "target": 15})
    found = sequence[-1]
    assert found.kind is StepKind.FOUND
    assert (found.payload["left"], found.payload["right"]) == (2, 4)


def test_sliding_window_best_sum():
    sequence = _produce("sliding_window", {"array": "2 1 5 1 3 2", "window": 3})
    done = sequence[-1]
    assert done.payload["best"] == 9
    assert (done.payload["start"], done.payload["end"]) == (2, 5)
    assert sequence[1].kind is StepKind.WINDOW


def test_radix_sort_distributes_every_digit_place():
    sequence = _produce("radix_sort", "170 45 75 90 802 24 2 66")
    collects = [s for s in sequence if s.kind is StepKind.COLLECT]
    assert [s.payload["place"] for s in collects] == [1, 10, 100]


def test_dfs_order():
    sequence = _produce("dfs", {"edges": UNDIRECTED, "start": "A"})
    assert list(sequence[-1].payload["order"]) == ["A", "B", "D", "C", "E"]
    assert any(s.kind is StepKind.POP and s.get("skipped") for s in sequence)


def test_bfs_order():
    sequence = _produce("bfs", {"edges": UNDIRECTED, "start": "A"})
    assert list(sequence[-1].payload["order"]) == ["A", "B", "C", "D", "E"]


def test_topological_sort_order():
    sequence = _produce("topological_sort", {"edges": "A->B, A->C, B->D, C->D, D->E"})
    assert list(sequence[-1].payload["order"]) == ["A", "B", "C", "D", "E"]
    assert sequence[-1].payload["cycle"] is False


def test_topological_sort_reports_cycle():
    sequence = _produce("topological_sort", {"edges": "A->B, B->C, C->A, C->D"})
    done = sequence[-1]
    assert done.payload["cycle"] is True
    assert list(done.payload["remaining"]) == ["A", "B", "C", "D"]


def test_topological_sort_ignores_duplicate_edges():
    sequence = _produce("topological_sort", {"edges": "A->B, A->B, B->C"})
    assert sequence[-1].payload["cycle"] is False


@pytest.mark.parametrize("name", ["kruskal", "prim"])
def test_minimum_spanning_tree_total(name):
    sequence = _produce(name, {"edges": WEIGHTED})
    done = sequence[-1]
    assert done.payload["total"] == 11
    assert done.payload["connected"] is True
    assert len(done.payload["edges"]) == 4


def test_kruskal_disconnected_graph():
    sequence = _produce("kruskal", {"edges": "A-B:1, C-D:2"})
    assert sequence[-1].payload["connected"] is False


def test_lazy_production_defers_steps():
    sequence = _produce("bubble_sort", "5 4 3 2 1", lazy_steps=True)
    assert sequence.materialized == 0
    assert sequence[0].kind is StepKind.START
    assert not sequence.complete


@pytest.mark.parametrize("raw", ["", "   ", None, "1, two, 3", [1, "x"], "nan"])
def test_invalid_array_message(raw):
    assert _message("bubble_sort", raw) == "Please enter a valid array of numbers."


def test_array_too_large():
    assert _message("bubble_sort", list(range(21))) == errors.ARRAY_TOO_LARGE.format(max=20)


def test_search_validation_messages():
    assert _message("binary_search", {"array": "3 1 2", "target": 1}) == errors.UNSORTED_ARRAY
    assert _message("binary_search", {"array": "1 2 3", "target": "x"}) == errors.INVALID_TARGET
    assert _message("two_pointers", {"array": "1 2 3", "target": None}) == errors.INVALID_PAIR_TARGET
    assert _message("sliding_window", {"array": "1 2 3", "window": 4}) == errors.INVALID_WINDOW
    assert _message("sliding_window", {"array": "1 2 3", "window": 1.5}) == errors.INVALID_WINDOW


def test_radix_sort_rejects_negative_and_fractional_values():
    assert _message("radix_sort", "3 -1 2") == errors.INVALID_RADIX
    assert _message("radix_sort", "3 1.5 2") == errors.INVALID_RADIX


def test_graph_validation_messages():
    assert _message("dfs", {"edges": "", "start": "A"}) == errors.INVALID_EDGES
    assert _message("dfs", {"edges": "A-A", "start": "A"}) == errors.INVALID_EDGES
    assert _message("dfs", {"edges": "A-B", "start": "Z"}) == errors.INVALID_START
    assert _message("bfs", {"edges": "A-B"}) == errors.INVALID_START
    assert _message("topological_sort", {"edges": "A-B"}) == errors.DIRECTED_EDGES_REQUIRED
    assert _message("kruskal", {"edges": "A-B, B-C:2"}) == errors.WEIGHTED_EDGES_REQUIRED
    assert _message("prim", {"edges": "A->B:1"}) == errors.WEIGHTED_EDGES_REQUIRED


def test_registry_covers_every_producer():
    assert len(PRODUCERS) == 15
    for name, producer_class in PRODUCERS.items():
        assert producer_class.name == name
        assert producer_class.title
    with pytest.raises(ValueError):
        create_producer("bogo_sort")


def test_generate_array_bounds_and_seed():
    config = PlaybackConfig()
    values = generate_array(10, config, seed=7)
    assert values == generate_array("10", config, seed=7)
    assert len(values) == 10
    assert all(1 <= v <= config.random_value_max for v in values)

    ordered = generate_array(6, config, sorted_values=True, seed=1)
    assert ordered == sorted(ordered)

    message = errors.INVALID_SIZE.format(min=2, max=20)
    for size in (1, 21, "abc"):
        with pytest.raises(ValidationError) as info:
            generate_array(size, config)
        assert info.value.message == message
