"""Shared fixtures: a terminal double that captures rendered output."""

import io
from contextlib import contextmanager

import blessed
import pytest

from linepad.keyboard import KeyboardHandler


class FakeTerminal:
    """Stands in for TerminalInterface without touching a real tty.

    Sequences are produced by a real blessed Terminal writing into a
    StringIO, so tests can compare against `term.move(...)` and friends.
    """

    def __init__(self, height=24, width=80, cursor_row=0, keys=()):
        self.term = blessed.Terminal(kind='xterm-256color', stream=io.StringIO(), force_styling=True)
        self.height = height
        self.width = width
        self.row = cursor_row
        self.events = [KeyboardHandler().parse_key(k) if isinstance(k, str) else k for k in keys]
        self.writes = []
        self.flushes = 0
        self.raw_entered = 0
        self.raw_exited = 0

    @contextmanager
    def raw_mode(self):
        self.raw_entered += 1
        try:
            yield self
        finally:
            self.raw_exited += 1

    def next_event(self):
        if not self.events:
            raise AssertionError("editor asked for more input than the test supplied")
        return self.events.pop(0)

    def write(self, text):
        self.writes.append(text)

    def flush(self):
        self.flushes += 1

    def execute(self, text):
        self.write(text)
        self.flush()

    def cursor_row(self):
        return self.row

    @property
    def output(self):
        return "".join(self.writes)


@pytest.fixture
def fake_terminal():
    return FakeTerminal()
