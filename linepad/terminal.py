"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
import os
import select
import signal
import sys
from collections import deque
from contextlib import contextmanager
from typing import Optional, Union

import blessed
from curtsies import Input
from curtsies.events import PasteEvent

from .constants import EditorConstants
from .keyboard import KeyboardHandler, KeyEvent, ResizeEvent

logger = logging.getLogger(__name__)

Event = Union[KeyEvent, ResizeEvent]


class TerminalError(RuntimeError):
    """The terminal could not be queried or written to."""


def scroll_up_sequence(rows: int) -> str:
    """ANSI SU: move screen content up by `rows`, blank rows appear below."""
    return f"\x1b[{rows}S"


def scroll_down_sequence(rows: int) -> str:
    """ANSI SD: move screen content down by `rows`."""
    return f"\x1b[{rows}T"


class TerminalInterface:
    """Handles terminal I/O using Blessed.

    Output goes to the blessed terminal's stream. Input is read through
    curtsies while `raw_mode()` is active; resizes are delivered through a
    self-pipe written by the SIGWINCH handler.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.keyboard = KeyboardHandler()
        self._input: Optional[Input] = None
        self._pending: deque[Event] = deque()
        self._resize_pipe_r: Optional[int] = None
        self._resize_pipe_w: Optional[int] = None

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame  # Unused
        # Write to pipe to wake up select()
        os.write(self._resize_pipe_w, EditorConstants.RESIZE_PIPE_MARKER)

    @contextmanager
    def raw_mode(self):
        """Put the terminal in raw input mode for the duration of the block.

        Everything acquired here (raw mode, curtsies input, the SIGWINCH
        handler and its pipe) is released on every exit path.
        """
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)
        try:
            with self.term.raw():
                # Let Ctrl-S reach us instead of stopping terminal output
                with Input(keynames='curtsies', disable_terminal_start_stop=True) as input_generator:
                    self._input = input_generator
                    yield self
        finally:
            self._input = None
            self._pending.clear()
            signal.signal(signal.SIGWINCH, original_winch_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self._resize_pipe_r = self._resize_pipe_w = None

    def next_event(self) -> Event:
        """Block until the next key press or resize."""
        while not self._pending:
            self._wait_for_events()
        return self._pending.popleft()

    def _wait_for_events(self):
        if self._input is None:
            raise TerminalError("terminal input is not active; use raw_mode()")
        ready, _, _ = select.select([sys.stdin, self._resize_pipe_r], [], [])
        if self._resize_pipe_r in ready:
            # Several signals may have queued up; one redraw covers them all
            os.read(self._resize_pipe_r, 1024)
            logger.debug("terminal resized to %sx%s", self.width, self.height)
            self._pending.append(ResizeEvent())
        if sys.stdin in ready:
            self._drain_input()

    def _drain_input(self):
        # Take everything curtsies already buffered; select won't see it
        evt = self._input.send(0)
        while evt is not None:
            if isinstance(evt, PasteEvent):
                # Fast input arrives batched; replay it key by key
                for key in evt.events:
                    self._pending.append(self.keyboard.parse_key(key))
            else:
                self._pending.append(self.keyboard.parse_key(str(evt)))
            evt = self._input.send(0)

    def _reclaim_typeahead(self):
        """Queue keys that blessed read while waiting for a position report.

        blessed keeps input that arrived around the report in its own
        buffer, which curtsies never looks at.
        """
        typed = ''
        key = self.term.inkey(timeout=0)
        while key:
            typed += str(key)
            key = self.term.inkey(timeout=0)
        if typed:
            logger.debug("reclaimed %d characters typed during cursor query", len(typed))
            self._input.unget_bytes(typed.encode('utf-8'))
            self._drain_input()

    def write(self, text: str):
        try:
            self.term.stream.write(text)
        except OSError as e:
            raise TerminalError(f"cannot write to terminal: {e}") from e

    def flush(self):
        try:
            self.term.stream.flush()
        except OSError as e:
            raise TerminalError(f"cannot flush terminal output: {e}") from e

    def execute(self, text: str):
        """Write and flush immediately."""
        self.write(text)
        self.flush()

    def cursor_row(self) -> int:
        """Row the terminal cursor is currently on."""
        row, _ = self.term.get_location(timeout=EditorConstants.CURSOR_QUERY_TIMEOUT)
        if self._input is not None:
            self._reclaim_typeahead()
        if row < 0:
            raise TerminalError("terminal did not report the cursor position")
        return row

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows."""
        return self.term.height
