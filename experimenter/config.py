"""Configuration presets for playback sessions."""

from algoplay.config import PlaybackConfig


def create_default_config(speed_ms: float = 200.0) -> PlaybackConfig:
    """
    Create default configuration for demos.

    Args:
        speed_ms: Interval between auto-advance ticks (ms)

    Returns:
        Default PlaybackConfig
    """
    return PlaybackConfig(
        speed_ms=speed_ms,
        min_speed_ms=10.0,
        max_speed_ms=5000.0,
        backward_strategy="recompute",
        lazy_steps=False,
        max_array_size=20,
        min_random_size=2,
        max_random_size=20,
        random_value_max=99,
        animation_frequency=30.0,
        window_size=(960, 540),
        plot_backend="Agg",
    )


def create_test_config(speed_ms: float = 50.0) -> PlaybackConfig:
    """Quiet, fast configuration for tests and headless runs."""
    return PlaybackConfig(speed_ms=speed_ms, verbose=False)
