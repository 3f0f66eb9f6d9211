"""Shared fixtures."""

import pytest


class FakeHandle:
    def __init__(self, callback):
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Records call_later requests; ``fire`` runs the newest live one."""

    def __init__(self):
        self.handles: list[FakeHandle] = []

    def call_later(self, delay, callback, *args):
        handle = FakeHandle(lambda: callback(*args))
        self.handles.append(handle)
        return handle

    @property
    def pending(self):
        return [h for h in self.handles if not h.cancelled]

    def fire(self):
        handle = self.pending[-1]
        handle.cancelled = True
        handle.callback()


@pytest.fixture
def sched():
    return FakeScheduler()
