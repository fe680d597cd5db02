"""Configuration parameters for algorithm playback."""

from dataclasses import dataclass
from typing import Tuple

BACKWARD_STRATEGIES = ("recompute", "inverse")


@dataclass
class PlaybackConfig:
    """Configuration for the playback engine and its presentation layer."""

    # Playback timing
    speed_ms: float = 500.0  # Interval between auto-advance ticks (ms)
    min_speed_ms: float = 10.0  # Fastest allowed interval (ms)
    max_speed_ms: float = 5000.0  # Slowest allowed interval (ms)

    # Stepping
    backward_strategy: str = "recompute"  # "recompute" (replay prefix) or "inverse" (undo steps)
    lazy_steps: bool = False  # Produce steps on demand instead of up front

    # Input bounds
    max_array_size: int = 20  # Largest accepted input array
    min_random_size: int = 2  # Smallest generated array
    max_random_size: int = 20  # Largest generated array
    random_value_max: int = 99  # Generated values are drawn from [1, random_value_max]

    # Presentation
    animation_frequency: float = 30.0  # Animator refresh rate in Hz (1-120)
    window_size: Tuple[int, int] = (960, 540)  # Animator window size (pixels)
    plot_backend: str = "Agg"  # matplotlib backend for the plotter
    verbose: bool = True  # Print step log lines

    def __post_init__(self):
        """Validate and adjust configuration."""
        if self.backward_strategy not in BACKWARD_STRATEGIES:
            raise ValueError(
                f"Unknown backward strategy: {self.backward_strategy} "
                f"(expected one of {', '.join(BACKWARD_STRATEGIES)})"
            )

        # Ensure speed bounds are positive and ordered
        self.min_speed_ms = max(1.0, float(self.min_speed_ms))
        self.max_speed_ms = max(self.min_speed_ms, float(self.max_speed_ms))
        self.speed_ms = self.clamp_speed(self.speed_ms)

        self.max_array_size = max(1, int(self.max_array_size))
        self.min_random_size = max(1, int(self.min_random_size))
        self.max_random_size = max(self.min_random_size, int(self.max_random_size))
        self.random_value_max = max(1, int(self.random_value_max))

        self.animation_frequency = max(1.0, min(120.0, float(self.animation_frequency)))

    def clamp_speed(self, speed_ms: float) -> float:
        """Clamp a tick interval to the configured bounds."""
        return max(self.min_speed_ms, min(self.max_speed_ms, float(speed_ms)))
