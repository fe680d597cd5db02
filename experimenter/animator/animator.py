"""Animator interface - handles visualization."""

from typing import List

from .pygame_framer import PygameFramer


class Animator:
    """
    Animator interface for visualization.

    Decoupled from playback logic: it reads the controller's observables and
    the applier snapshot, and reports keyboard input as command names.
    """

    def __init__(self, config, title: str = ""):
        """
        Initialize animator.

        Args:
            config: Configuration object
            title: Heading drawn above the visualization
        """
        self.title = title
        self.frames = 0
        self.framer = PygameFramer(
            window_size=tuple(config.window_size),
            caption=f"AlgoPlay - {title}" if title else "AlgoPlay",
        )

    @property
    def is_running(self) -> bool:
        return self.framer.running

    def start(self):
        self.framer.start()

    def step(self, controller):
        """Animation step."""
        if not self.framer.running:
            return
        frame = {
            "snapshot": controller.applier.snapshot(),
            "title": self.title,
            "status": controller.status_text,
            "progress": controller.progress_text,
            "state": controller.state.value,
            "speed_ms": controller.speed_ms,
        }
        self.framer.render_frame(frame)
        self.frames += 1

    def poll_commands(self) -> List[str]:
        return self.framer.poll_commands()

    def finish(self):
        self.framer.finish()
