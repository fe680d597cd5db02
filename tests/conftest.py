"""Shared fixtures: a manually driven event loop clock."""

import pytest


class FakeHandle:
    """Stand-in for asyncio.TimerHandle."""

    def __init__(self, when, callback, args, seq):
        self._when = when
        self.callback = callback
        self.args = args
        self.seq = seq
        self.cancelled = False

    def when(self):
        return self._when

    def cancel(self):
        self.cancelled = True

    def run(self):
        self.callback(*self.args)


class FakeLoop:
    """Event loop subset used by IntervalTimer: time() and call_at()."""

    def __init__(self):
        self.now = 0.0
        self.handles = []
        self._seq = 0

    def time(self):
        return self.now

    def call_at(self, when, callback, *args):
        handle = FakeHandle(when, callback, args, self._seq)
        self._seq += 1
        self.handles.append(handle)
        return handle

    def call_later(self, delay, callback, *args):
        return self.call_at(self.now + delay, callback, *args)

    def pending(self):
        return [h for h in self.handles if not h.cancelled]

    def run_next(self) -> bool:
        """Jump to the earliest pending handle and run it."""
        pending = self.pending()
        if not pending:
            return False
        handle = min(pending, key=lambda h: (h.when(), h.seq))
        self.handles.remove(handle)
        self.now = max(self.now, handle.when())
        handle.run()
        return True

    def advance(self, seconds: float):
        """Move the clock forward, running every handle that falls due."""
        target = self.now + seconds
        while True:
            due = [h for h in self.pending() if h.when() <= target]
            if not due:
                break
            handle = min(due, key=lambda h: (h.when(), h.seq))
            self.handles.remove(handle)
            self.now = max(self.now, handle.when())
            handle.run()
        self.now = target


@pytest.fixture
def fake_loop():
    return FakeLoop()
