"""Session facade tests with logger, plotter and animator attached."""

import asyncio

import pytest

from algoplay import AlgoPlay, PlaybackState
from appliers import ArrayApplier, CompositeApplier, GraphApplier, TranscriptApplier
from experimenter import Logger, create_default_config, create_test_config
from experimenter.plotter import create_plotter
from producers import create_producer
from steps import ValidationError

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False


class ScriptedAnimator:
    """Animator stand-in replaying a fixed list of command batches."""

    def __init__(self, batches):
        self.batches = list(batches)
        self.frames = 0
        self.started = False
        self.finished = False

    def start(self):
        self.started = True

    def step(self, controller):
        self.frames += 1

    def poll_commands(self):
        return self.batches.pop(0) if self.batches else ["quit"]

    def finish(self):
        self.finished = True


def _session(fake_loop, name="bubble_sort", **kwargs):
    config = create_test_config(speed_ms=500)
    producer = create_producer(name, config)
    return AlgoPlay(config, producer, ArrayApplier(), loop=fake_loop, **kwargs)


def test_logger_output(fake_loop, capsys):
    config = create_default_config(speed_ms=500)
    session = AlgoPlay(config, create_producer("binary_search", config), ArrayApplier(),
                       logger=Logger(), loop=fake_loop)
    session.start({"array": "1,3,5,7,9,11,13", "target": 7})
    fake_loop.advance(1.5)
    session.finish()

    out = capsys.readouterr().out
    assert "Configuration:" in out
    assert "[playing]" in out
    assert "3/3  found" in out
    assert "[finished]" in out
    assert "Final Statistics:" in out
    assert "Position: 3/3" in out


def test_logger_reports_validation_errors(fake_loop, capsys):
    session = _session(fake_loop, logger=Logger())
    with pytest.raises(ValidationError):
        session.start("")
    assert "Error: Please enter a valid array of numbers." in capsys.readouterr().out


def test_quiet_logger_skips_step_lines(fake_loop, capsys):
    session = _session(fake_loop, logger=Logger())
    session.start("2 1")
    fake_loop.advance(5.0)
    out = capsys.readouterr().out
    assert "Configuration:" in out
    assert "compare" not in out


def test_plotter_tracks_and_truncates(fake_loop, tmp_path):
    config = create_test_config()
    plotter = create_plotter("matplotlib", config, title="Bubble Sort")
    session = _session(fake_loop, plotter=plotter)
    session.start("3 2 1")
    session.controller.pause()

    for _ in range(4):
        session.controller.step_forward()
    assert plotter.totals()["compares"] == 2
    assert plotter.totals()["swaps"] == 1

    session.controller.step_backward()
    session.controller.step_backward()
    assert [position for position, _ in plotter.points()] == [0, 1, 2]

    session.controller.jump_to_end()
    totals = plotter.totals()
    assert totals["compares"] == 3
    assert totals["swaps"] == 3

    path = tmp_path / "operations.png"
    plotter.save(str(path))
    assert path.exists()
    session.finish()


def test_unknown_plotter():
    with pytest.raises(ValueError):
        create_plotter("tensorboard", create_test_config())


def test_commands_drive_controller(fake_loop):
    session = _session(fake_loop)
    session.start("5 4 3 2 1")
    controller = session.controller

    assert session.handle_command("toggle")
    assert controller.state is PlaybackState.PAUSED
    session.handle_command("step_forward")
    session.handle_command("step_forward")
    session.handle_command("step_backward")
    assert controller.position == 1
    session.handle_command("slower")
    assert controller.speed_ms == 1000
    session.handle_command("faster")
    session.handle_command("faster")
    assert controller.speed_ms == 250
    session.handle_command("jump_to_end")
    assert controller.state is PlaybackState.FINISHED
    session.handle_command("rewind")
    assert controller.position == 0
    session.handle_command("reset")
    assert controller.cursor is None
    assert session.handle_command("quit") is False
    with pytest.raises(ValueError):
        session.handle_command("dance")


def test_run_without_animator_plays_to_end():
    config = create_test_config(speed_ms=10)
    session = AlgoPlay(config, create_producer("selection_sort", config), ArrayApplier())
    asyncio.run(session.run("3 1 2"))
    assert session.controller.state is PlaybackState.FINISHED
    assert session.controller.applier.snapshot()["values"] == [1, 2, 3]


def test_run_with_animator_until_quit():
    config = create_test_config(speed_ms=5000)
    animator = ScriptedAnimator([["toggle"], ["step_forward", "step_forward"], [], ["quit", "step_forward"]])
    applier = CompositeApplier(ArrayApplier(), TranscriptApplier())
    session = AlgoPlay(config, create_producer("bubble_sort", config), applier, animator=animator)

    asyncio.run(session.run("4 3 2 1"))
    assert animator.started and animator.finished
    assert session.controller.position == 2
    assert session.controller.state is PlaybackState.PAUSED
    assert animator.frames >= 3


def test_run_with_invalid_input_still_finishes():
    animator = ScriptedAnimator([])
    config = create_test_config()
    session = AlgoPlay(config, create_producer("dfs", config), GraphApplier(), animator=animator)
    with pytest.raises(ValidationError):
        asyncio.run(session.run({"edges": "A-B", "start": "Q"}))
    assert animator.finished


@pytest.mark.skipif(not PYGAME_AVAILABLE, reason="pygame not installed")
def test_pygame_animator_draws_and_maps_keys(fake_loop, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    from experimenter.animator import Animator

    config = create_test_config()
    for name, raw_input, applier in [
        ("quick_sort", "5 2 8 1", ArrayApplier()),
        ("topological_sort", {"edges": "A->B, B->C"}, CompositeApplier(GraphApplier(), TranscriptApplier())),
        ("dfs", {"edges": [("A-1", "B"), ("B", "C")], "start": "A-1"}, GraphApplier()),
    ]:
        animator = Animator(config, title=name)
        session = AlgoPlay(config, create_producer(name, config), applier, animator=animator, loop=fake_loop)
        session.start(raw_input)
        fake_loop.advance(2.0)
        assert animator.frames > 0

        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT))
        assert animator.poll_commands() == ["toggle", "step_forward"]
        session.finish()
        assert not animator.is_running
