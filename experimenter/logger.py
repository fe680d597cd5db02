"""Console logger for playback sessions."""

from typing import Optional

from algoplay.config import PlaybackConfig
from steps import Step, ValidationError


class Logger:
    """
    Interface for logging.
    """

    def __init__(self, verbose: bool = True):
        self.verbose = verbose

    def log_config(self, config: PlaybackConfig):
        self.verbose = config.verbose
        print("\nConfiguration:")
        print(f"  Speed: {config.speed_ms:.0f} ms/step ({config.min_speed_ms:.0f}-{config.max_speed_ms:.0f})")
        print(f"  Backward strategy: {config.backward_strategy}")
        print(f"  Lazy steps: {config.lazy_steps}")
        print(f"  Animation FPS: {config.animation_frequency}")

    def log_state(self, state):
        """Log a playback state change."""
        if self.verbose:
            print(f"[{state.value}]")

    def log_step(self, position: int, length: int, step: Optional[Step]):
        """Log the step at the cursor."""
        if not self.verbose:
            return
        if step is None:
            print(f"{position}/{length}  Ready")
        else:
            print(f"{position}/{length}  {step.kind.value:<12} {step.message}")

    def log_error(self, error: ValidationError):
        print(f"Error: {error.message}")

    def log_final(self, session):
        controller = session.controller
        print("\n" + "=" * 60)
        print("Final Statistics:")
        print(f"  Algorithm: {session.producer.title}")
        print(f"  State: {controller.state.value}")
        print(f"  Position: {controller.progress_text}")
        print(f"  Cursor moves: {session.moves}")
        for kind, count in sorted(controller.statistics().items(), key=lambda item: item[0].value):
            print(f"  {kind.value}: {count}")
        print("=" * 60)
