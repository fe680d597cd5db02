"""Playback controller: the Play/Pause/Step/Speed/Reset state machine."""

import asyncio
from collections import Counter
from enum import Enum
from typing import Any, Callable, Dict, Optional

from appliers import VisualApplier
from steps import Step, ValidationError
from .config import PlaybackConfig
from .cursor import PlaybackCursor
from .timer import IntervalTimer


class PlaybackState(Enum):
    """Playback states."""
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    FINISHED = "finished"


class ControlResult(Enum):
    """Outcome of a control request."""
    OK = "ok"
    NOOP = "noop"  # Boundary or already in the requested state


class PlaybackController:
    """
    Orchestrates a step producer, a playback cursor and the single timer.

    Every piece of playback state lives on the instance. Validation happens
    before anything is mutated, timers are cancelled before any state change,
    and manual stepping while playing pauses first.
    """

    def __init__(self, producer, applier: VisualApplier,
                 config: Optional[PlaybackConfig] = None,
                 loop: Optional[asyncio.AbstractEventLoop] = None):
        """
        Initialize controller.

        Args:
            producer: Step producer with a `produce(raw_input)` method
            applier: Visual applier receiving steps
            config: Configuration object
            loop: Event loop for the timer (default: running loop at play time)
        """
        self.producer = producer
        self.applier = applier
        self.config = config if config is not None else PlaybackConfig()

        self.state = PlaybackState.IDLE
        self.speed_ms = self.config.speed_ms
        self.cursor: Optional[PlaybackCursor] = None
        self.last_error: Optional[ValidationError] = None

        self._timer = IntervalTimer(self._on_tick, loop=loop)

        # Callbacks
        self._step_callback: Optional[Callable[[int, Optional[Step]], None]] = None
        self._state_callback: Optional[Callable[[PlaybackState], None]] = None
        self._error_callback: Optional[Callable[[ValidationError], None]] = None

    # ------------------------------------------------------------------
    # Observables
    # ------------------------------------------------------------------

    @property
    def position(self) -> int:
        return self.cursor.position if self.cursor else 0

    @property
    def length(self) -> int:
        return self.cursor.length if self.cursor else 0

    @property
    def progress_text(self) -> str:
        """Progress as "pos/length"."""
        return f"{self.position}/{self.length}"

    @property
    def current_step(self) -> Optional[Step]:
        return self.cursor.current_step if self.cursor else None

    @property
    def status_text(self) -> str:
        """Status line for the UI."""
        if self.cursor is None:
            return self.last_error.message if self.last_error else "Enter input and press Start."
        step = self.cursor.current_step
        return step.message if step else "Ready"

    @property
    def is_playing(self) -> bool:
        return self.state is PlaybackState.PLAYING

    @property
    def timer_active(self) -> bool:
        return self._timer.active

    def statistics(self) -> Counter:
        """Counts of step kinds applied so far."""
        if self.cursor is None:
            return Counter()
        return self.cursor.sequence.kind_counts(self.position)

    def controls(self) -> Dict[str, bool]:
        """Which UI controls are enabled in the current state."""
        loaded = self.cursor is not None
        at_end = loaded and self.cursor.at_end
        playing = self.state is PlaybackState.PLAYING
        return {
            "start": True,
            "play": loaded and not playing and not at_end,
            "pause": playing,
            "step_forward": loaded and not at_end,
            "step_backward": loaded and self.position > 0,
            "reset": loaded,
            "speed": True,
        }

    # ------------------------------------------------------------------
    # Callbacks
    # ------------------------------------------------------------------

    def set_step_callback(self, callback: Callable[[int, Optional[Step]], None]):
        """
        Set callback for cursor moves.

        Args:
            callback: Function(position, current_step) called after each move
        """
        self._step_callback = callback

    def set_state_callback(self, callback: Callable[[PlaybackState], None]):
        """Set callback for state changes. Function(new_state)."""
        self._state_callback = callback

    def set_error_callback(self, callback: Callable[[ValidationError], None]):
        """Set callback for rejected input. Function(error)."""
        self._error_callback = callback

    def _set_state(self, state: PlaybackState):
        if state is self.state:
            return
        self.state = state
        if self._state_callback:
            self._state_callback(state)

    def _notify_step(self):
        if self._step_callback:
            self._step_callback(self.position, self.current_step)

    def _settle_state(self):
        """State after a manual move."""
        if self.cursor.at_end:
            self._set_state(PlaybackState.FINISHED)
        elif self.cursor.at_start:
            self._set_state(PlaybackState.IDLE)
        else:
            self._set_state(PlaybackState.PAUSED)

    # ------------------------------------------------------------------
    # Control surface
    # ------------------------------------------------------------------

    def load(self, raw_input: Any) -> ControlResult:
        """
        Validate input and install a fresh step sequence at position 0.

        Raises:
            ValidationError: input rejected; the controller is left unchanged
        """
        try:
            sequence = self.producer.produce(raw_input)
        except ValidationError as error:
            self.last_error = error
            if self._error_callback:
                self._error_callback(error)
            raise

        self._timer.cancel()
        self.last_error = None
        self.cursor = PlaybackCursor(sequence, self.applier, self.config.backward_strategy)
        self._set_state(PlaybackState.IDLE)
        self._notify_step()
        return ControlResult.OK

    def start(self, raw_input: Any) -> ControlResult:
        """
        Load input and begin auto-advancing.

        Raises:
            ValidationError: input rejected; the controller is left unchanged
            RuntimeError: no event loop to tick on; the controller is left unchanged
        """
        self._timer.resolve_loop()
        self.load(raw_input)
        return self.play()

    def play(self) -> ControlResult:
        """Begin or resume auto-advance at the current speed."""
        if self.cursor is None or self.state is PlaybackState.PLAYING or self.cursor.at_end:
            return ControlResult.NOOP
        self._timer.start(self.speed_ms / 1000.0)
        self._set_state(PlaybackState.PLAYING)
        return ControlResult.OK

    resume = play

    def pause(self) -> ControlResult:
        """Stop auto-advance, keeping the position."""
        if self.state is not PlaybackState.PLAYING:
            return ControlResult.NOOP
        self._timer.cancel()
        self._set_state(PlaybackState.PAUSED)
        return ControlResult.OK

    def toggle(self) -> ControlResult:
        """Play/Pause button."""
        if self.state is PlaybackState.PLAYING:
            return self.pause()
        return self.play()

    def step_forward(self) -> ControlResult:
        """Apply one step manually (pauses first while playing)."""
        self.pause()
        if self.cursor is None or self.cursor.step_forward() is None:
            return ControlResult.NOOP
        self._settle_state()
        self._notify_step()
        return ControlResult.OK

    def step_backward(self) -> ControlResult:
        """Undo one step manually (pauses first while playing)."""
        self.pause()
        if self.cursor is None or not self.cursor.step_backward():
            return ControlResult.NOOP
        self._settle_state()
        self._notify_step()
        return ControlResult.OK

    def seek(self, position: int) -> ControlResult:
        """Jump to a position, clamped to [0, length] (pauses first while playing)."""
        self.pause()
        if self.cursor is None or not self.cursor.seek(position):
            return ControlResult.NOOP
        self._settle_state()
        self._notify_step()
        return ControlResult.OK

    def jump_to_end(self) -> ControlResult:
        if self.cursor is None:
            return ControlResult.NOOP
        return self.seek(self.cursor.length)

    def set_speed(self, speed_ms: float) -> ControlResult:
        """
        Change the tick interval; while playing the timer restarts at the new interval.

        Args:
            speed_ms: Milliseconds per step (clamped to the configured bounds)
        """
        self.speed_ms = self.config.clamp_speed(speed_ms)
        if self.state is PlaybackState.PLAYING:
            self._timer.start(self.speed_ms / 1000.0)
        return ControlResult.OK

    def reset(self) -> ControlResult:
        """Cancel playback, restore the initial visual and discard the sequence."""
        self._timer.cancel()
        if self.cursor is None and self.state is PlaybackState.IDLE:
            return ControlResult.NOOP
        if self.cursor is not None:
            self.cursor.reset()
        self._notify_step()
        self.cursor = None
        self._set_state(PlaybackState.IDLE)
        return ControlResult.OK

    def close(self):
        """Stop playback for good (page navigation)."""
        self._timer.cancel()
        if self.state is PlaybackState.PLAYING:
            self._set_state(PlaybackState.PAUSED)

    # ------------------------------------------------------------------
    # Timer
    # ------------------------------------------------------------------

    def _on_tick(self):
        if self.state is not PlaybackState.PLAYING or self.cursor is None:
            return
        self.cursor.step_forward()
        if self.cursor.at_end:
            self._timer.cancel()
            self._set_state(PlaybackState.FINISHED)
        self._notify_step()

    async def wait_until_stopped(self, poll_interval: float = 0.01):
        """Wait until the controller leaves the PLAYING state."""
        while self.state is PlaybackState.PLAYING:
            await asyncio.sleep(poll_interval)
