"""Main editor controller: the editing session loop."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .commands import CommandRegistry
from .constants import EditorConstants
from .cursor import CursorNavigator
from .document import Document
from .keyboard import KeyEvent, KeyType, ResizeEvent
from .renderer import Renderer
from .terminal import TerminalInterface
from .viewport import Viewport
from .width import WidthTable

logger = logging.getLogger(__name__)


@dataclass
class EditorResult:
    """Outcome of an editing session."""
    save: bool  # Whether the user chose to keep the changes
    content: str  # The final document, lines joined with '\n'


class Phase(Enum):
    EDITING = "editing"
    EXIT_CONFIRM = "exit_confirm"
    DONE = "done"


class Editor:
    """Full-screen editor over a single document.

    The terminal is injected so tests can capture output; by default a
    real blessed/curtsies terminal is used.
    """

    def __init__(self, text: str = "", terminal: Optional[TerminalInterface] = None,
                 widths: Optional[WidthTable] = None):
        self.terminal = terminal or TerminalInterface()
        self.document = Document.from_text(text)
        self.navigator = CursorNavigator(self.document, widths)
        self.viewport = Viewport()
        self.renderer = Renderer(self.terminal)
        self.command_registry = CommandRegistry()
        self.phase = Phase.EDITING
        self.save = False

    @property
    def cursor(self):
        return self.navigator.cursor

    def _set_phase(self, phase: Phase):
        logger.debug("phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    def insert_character(self, char: str):
        """Insert a character at the cursor and step past it."""
        self.document.insert(self.cursor.line_index, self.cursor.column_index, char)
        self.cursor.column_index += 1

    def new_line(self):
        """Split the current line at the cursor; the cursor starts the new line."""
        self.document.split(self.cursor.line_index, self.cursor.column_index)
        self.cursor.line_index += 1
        self.cursor.column_index = 0

    def erase_character(self):
        """Delete the character before the cursor, joining lines at column 0."""
        if self.cursor.column_index > 0:
            self.document.remove(self.cursor.line_index, self.cursor.column_index)
            self.cursor.column_index -= 1
        elif self.cursor.line_index > 0:
            self.cursor.column_index = self.document.join(self.cursor.line_index)
            self.cursor.line_index -= 1

    def force_save(self):
        """Keep the changes and finish without asking."""
        self.save = True
        self._set_phase(Phase.DONE)

    def request_exit(self):
        """Leave the editing phase and ask whether to save."""
        self._set_phase(Phase.EXIT_CONFIRM)

    def redraw(self):
        self.renderer.redraw(self.document, self.navigator, self.viewport)

    def handle_event(self, event):
        """Process one event of the editing phase."""
        if isinstance(event, KeyEvent):
            self.command_registry.execute(self, event)
        if self.phase == Phase.EDITING and isinstance(event, (KeyEvent, ResizeEvent)):
            self.redraw()

    def handle_confirm_key(self, event) -> bool:
        """Process one event of the exit confirmation.

        Returns:
            True once the user has answered
        """
        if not isinstance(event, KeyEvent) or event.key_type != KeyType.REGULAR:
            return False
        answer = event.value
        if answer == EditorConstants.CONFIRM_YES:
            self.save = True
        elif answer == EditorConstants.CONFIRM_NO:
            self.save = False
        else:
            return False
        self._set_phase(Phase.DONE)
        return True

    def _confirm_exit(self):
        self.renderer.show_prompt(EditorConstants.SAVE_PROMPT)
        while not self.handle_confirm_key(self.terminal.next_event()):
            pass
        self.renderer.clear()

    def run(self) -> EditorResult:
        """Run the session until the user leaves.

        Raw mode is held only for the duration of the session and is
        released on every exit path. Terminal failures propagate.
        """
        with self.terminal.raw_mode():
            self.redraw()
            while self.phase == Phase.EDITING:
                self.handle_event(self.terminal.next_event())

            self.renderer.clear()
            if self.phase == Phase.EXIT_CONFIRM:
                self._confirm_exit()

        return EditorResult(save=self.save, content=self.document.text())
