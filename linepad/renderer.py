"""Paints the visible part of the document to the terminal."""

import logging

from .constants import EditorConstants
from .cursor import CursorNavigator
from .document import Document
from .terminal import scroll_down_sequence, scroll_up_sequence
from .viewport import HeightChange, Viewport

logger = logging.getLogger(__name__)


def gutter_width(document_height: int) -> int:
    """Number of decimal digits in the largest line number."""
    return len(str(document_height))


class Renderer:
    """Draws document, gutter and cursor through a terminal sink.

    The sink is anything with the TerminalInterface output surface:
    `term` (a blessed Terminal used to build sequences), `write`, `flush`,
    `execute`, `height` and `cursor_row`.
    """

    def __init__(self, terminal):
        self.terminal = terminal

    @property
    def term(self):
        return self.terminal.term

    def _dimmed(self, text: str) -> str:
        return self.term.bright_black + self.term.dim + text + self.term.normal

    def _reserve_rows(self, change: HeightChange):
        """Scroll earlier terminal content out of the way when the view resizes."""
        if change == HeightChange.NONE:
            return
        row = self.terminal.cursor_row()
        logger.debug("view height %s, scrolling by %d rows", change.value, row)
        if row == 0:
            return
        if change == HeightChange.GROW:
            self.terminal.execute(scroll_up_sequence(row))
        else:
            self.terminal.execute(scroll_down_sequence(row))

    def render_line(self, line_number: int, text: str, gutter: int) -> str:
        """Compose one screen row: padded dimmed line number, separator, content."""
        number = str(line_number)
        padding = " " * (EditorConstants.GUTTER_LEFT_PADDING + gutter - len(number))
        out = [padding, self._dimmed(number), EditorConstants.GUTTER_SEPARATOR]
        for ch in text:
            if ch == "\t":
                out.append(self._dimmed(EditorConstants.TAB_RENDERING))
            else:
                out.append(ch)
        return "".join(out)

    def redraw(self, document: Document, navigator: CursorNavigator, viewport: Viewport):
        """Bring the screen in line with the document, cursor and viewport."""
        cursor = navigator.cursor
        change = viewport.update(self.terminal.height, document.line_count(), cursor.line_index)
        self._reserve_rows(change)

        navigator.clamp_column()

        gutter = gutter_width(document.line_count())
        out = [self.term.move(0, 0), self.term.clear_eos]
        rows = []
        for index in viewport.visible_range():
            rows.append(self.render_line(index + 1, document.line(index), gutter))
        out.append(EditorConstants.LINE_SEPARATOR.join(rows))

        cursor_x = EditorConstants.GUTTER_LEFT_PADDING + gutter + len(EditorConstants.GUTTER_SEPARATOR) \
            + navigator.display_offset()
        cursor_y = viewport.screen_row(cursor.line_index)
        out.append(self.term.move(cursor_y, cursor_x))

        self.terminal.write("".join(out))
        self.terminal.flush()

    def clear(self):
        """Home the cursor and blank the screen."""
        self.terminal.execute(self.term.move(0, 0) + self.term.clear_eos)

    def show_prompt(self, text: str):
        self.terminal.execute(text)
