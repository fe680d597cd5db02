"""Demo script for algorithm playback with optional animation."""

import asyncio
import sys

from algoplay import AlgoPlay
from appliers import ArrayApplier, CompositeApplier, GraphApplier, TranscriptApplier
from experimenter import Logger, create_default_config
from experimenter.animator import Animator
from experimenter.plotter import create_plotter
from producers import PRODUCERS, GraphProducer, create_producer, generate_array
from steps import ValidationError

# Example inputs for algorithms that cannot run on a random array alone
EXAMPLES = {
    "binary_search": {"target": 7},
    "two_pointers": {"target": 20},
    "sliding_window": {"window": 3},
    "dfs": {"edges": "A-B, A-C, B-D, C-D, D-E", "start": "A"},
    "bfs": {"edges": "A-B, A-C, B-D, C-D, D-E", "start": "A"},
    "topological_sort": {"edges": "A->B, A->C, B->D, C->D, D->E"},
    "kruskal": {"edges": "A-B:4, A-C:2, B-C:1, B-D:5, C-D:8, D-E:3"},
    "prim": {"edges": "A-B:4, A-C:2, B-C:1, B-D:5, C-D:8, D-E:3", "start": "A"},
}


def parse_args(argv):
    """Parse `[algorithm] [input] [--headless] [--key=value ...]`."""
    headless = "--headless" in argv
    options = {}
    positional = []
    for arg in argv:
        if arg == "--headless":
            continue
        if arg.startswith("--") and "=" in arg:
            key, value = arg[2:].split("=", 1)
            options[key] = value
        else:
            positional.append(arg)

    algorithm = positional[0] if positional else "heap_sort"
    if len(positional) > 1:
        options.setdefault(create_producer(algorithm).primary_field, positional[1])
    return algorithm, options, headless


def build_input(producer, options, config):
    """Fill missing fields from the examples, generating a random array when needed."""
    raw_input = dict(EXAMPLES.get(producer.name, {}))
    raw_input.update(options)
    if "array" in producer.fields and "array" not in raw_input:
        size = 8 if producer.name != "radix_sort" else 10
        raw_input["array"] = generate_array(size, config, sorted_values=producer.name in ("binary_search", "two_pointers"))
    return raw_input


async def main(algorithm: str, options: dict, headless: bool = False):
    """Run demo with optional animation."""
    print("=" * 60)
    print("AlgoPlay - Step-based Algorithm Playback Demo")
    print("=" * 60)

    if headless:
        print("\nRunning in headless mode (no animation, faster playback)...")
    else:
        print("\nRunning with animation...")
        print("Controls:")
        print("  SPACE: Play/Pause")
        print("  RIGHT / LEFT: Step forward / back")
        print("  UP / DOWN: Faster / slower")
        print("  HOME / END: Rewind / jump to end")
        print("  R: Reset")
        print("  ESC or Q: Quit")

    print("=" * 60)

    # Create configuration
    config = create_default_config(speed_ms=20.0 if headless else 400.0)
    config.verbose = headless

    producer = create_producer(algorithm, config)
    applier = GraphApplier() if isinstance(producer, GraphProducer) else ArrayApplier()
    applier = CompositeApplier(applier, TranscriptApplier())

    animator = None if headless else Animator(config, title=producer.title)
    plotter = create_plotter("matplotlib", config, title=producer.title)

    session = AlgoPlay(config, producer, applier, logger=Logger(), animator=animator, plotter=plotter)
    raw_input = build_input(producer, options, config)
    print(f"\n{producer.title}: {raw_input}")

    try:
        await session.run(raw_input)
    except ValidationError:
        # Already reported by the logger
        return
    except KeyboardInterrupt:
        print("\nPlayback interrupted by user.")

    if headless:
        path = f"{producer.name}_operations.png"
        plotter.save(path)
        print(f"Saved operation chart to {path}")


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] in ("-h", "--help"):
        print("Usage: python demo.py [algorithm] [input] [--headless] [--target=N] [--window=K] [--start=A]")
        print("Algorithms: " + ", ".join(sorted(PRODUCERS)))
        sys.exit(0)
    algorithm, options, headless = parse_args(sys.argv[1:])
    asyncio.run(main(algorithm, options, headless=headless))
