"""AlgoPlay interface - orchestrates one algorithm playback session."""

import asyncio
from typing import Any, Optional

from appliers import VisualApplier
from steps import Step, ValidationError
from .config import PlaybackConfig
from .controller import PlaybackController, PlaybackState

# Keyboard / UI command names understood by `handle_command`
COMMANDS = (
    "toggle", "step_forward", "step_backward", "faster", "slower",
    "rewind", "jump_to_end", "reset", "quit",
)


class AlgoPlay:
    """
    Runner interface for an algorithm playback session.

    Coordinates:
    - PlaybackController (steps, cursor, timer)
    - Logger (console log lines, optional)
    - Animator (pygame window and keyboard commands, optional)
    - Plotter (operation count chart, optional)

    Every cursor move of the controller is forwarded to the logger, animator
    and plotter. The controller owns all playback state.
    """

    def __init__(self, config: PlaybackConfig, producer, applier: VisualApplier,
                 logger=None, animator=None, plotter=None,
                 loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        """
        Initialize session.

        Args:
            config: Configuration object
            producer: Step producer for the algorithm
            applier: Visual applier receiving the steps
            logger: Logger for console output
            animator: Animator drawing the applier state
            plotter: Plotter charting operation counts
            loop: Event loop for the playback timer
        """
        self.config = config
        self.producer = producer
        self.logger = logger
        self.animator = animator
        self.plotter = plotter

        self._controller = PlaybackController(producer, applier, config, loop=loop)
        self._controller.set_step_callback(self._on_step)
        self._controller.set_state_callback(self._on_state)
        self._controller.set_error_callback(self._on_error)

        self.moves = 0
        self._started = False

    @property
    def controller(self) -> PlaybackController:
        return self._controller

    def _on_step(self, position: int, step: Optional[Step]):
        self.moves += 1
        if self.logger:
            self.logger.log_step(position, self._controller.length, step)
        if self.plotter:
            self.plotter.step(position, self._controller.statistics())
        if self.animator:
            self.animator.step(self._controller)

    def _on_state(self, state: PlaybackState):
        if self.logger:
            self.logger.log_state(state)

    def _on_error(self, error: ValidationError):
        if self.logger:
            self.logger.log_error(error)

    def start(self, raw_input: Any):
        """
        Start presentation components and begin playback of `raw_input`.

        Raises:
            ValidationError: input rejected; nothing is played
        """
        if not self._started:
            if self.logger:
                self.logger.log_config(self.config)
            if self.animator:
                self.animator.start()
            if self.plotter:
                self.plotter.start()
            self._started = True

        if self.plotter:
            self.plotter.clear()
        return self._controller.start(raw_input)

    def handle_command(self, command: str) -> bool:
        """
        Apply one UI command.

        Args:
            command: One of COMMANDS

        Returns:
            False if the command asks to quit
        """
        controller = self._controller
        if command == "quit":
            return False
        if command == "toggle":
            controller.toggle()
        elif command == "step_forward":
            controller.step_forward()
        elif command == "step_backward":
            controller.step_backward()
        elif command == "faster":
            controller.set_speed(controller.speed_ms / 2)
        elif command == "slower":
            controller.set_speed(controller.speed_ms * 2)
        elif command == "rewind":
            controller.seek(0)
        elif command == "jump_to_end":
            controller.jump_to_end()
        elif command == "reset":
            controller.reset()
        else:
            raise ValueError(f"Unknown command: {command}")
        return True

    async def run(self, raw_input: Any):
        """
        Play `raw_input` to completion.

        Without an animator this returns once playback stops. With an animator
        it keeps refreshing the window and applying keyboard commands until
        the user quits.
        """
        try:
            self.start(raw_input)
            if self.animator is None:
                await self._controller.wait_until_stopped()
                return

            frame_period = 1.0 / self.config.animation_frequency
            while all(self.handle_command(command) for command in self.animator.poll_commands()):
                self.animator.step(self._controller)
                await asyncio.sleep(frame_period)
        finally:
            self.finish()

    def finish(self):
        self._controller.close()

        if self.animator:
            self.animator.finish()

        if self.plotter:
            self.plotter.finish()

        if self.logger:
            self.logger.log_final(self)
