"""Cursor movement over a Document with display-width awareness."""

from dataclasses import dataclass
from typing import Optional

from .document import Document
from .width import UnicodeWidthTable, WidthTable, column_for_offset, display_width


@dataclass
class CursorPosition:
    line_index: int = 0
    column_index: int = 0


class CursorNavigator:
    """Moves a cursor around a document.

    Horizontal moves work in character indexes. Vertical moves keep the
    cursor at the same display offset, so lines holding tabs or wide
    glyphs stay visually aligned.
    """

    def __init__(self, document: Document, widths: Optional[WidthTable] = None):
        self.document = document
        self.widths = widths or UnicodeWidthTable()
        self.cursor = CursorPosition()

    def _current_length(self) -> int:
        return self.document.line_length(self.cursor.line_index)

    def display_offset(self) -> int:
        """Cells occupied by the characters before the cursor."""
        line = self.document.line(self.cursor.line_index)
        return display_width(line[:self.cursor.column_index], self.widths)

    def column_for_offset(self, offset: int) -> int:
        line = self.document.line(self.cursor.line_index)
        return column_for_offset(line, offset, self.widths)

    def clamp_column(self):
        self.cursor.column_index = min(self.cursor.column_index, self._current_length())

    def move_left(self):
        if self.cursor.column_index > 0:
            self.cursor.column_index -= 1
        elif self.cursor.line_index > 0:
            self.cursor.line_index -= 1
            self.cursor.column_index = self._current_length()

    def move_right(self):
        if self.cursor.column_index < self._current_length():
            self.cursor.column_index += 1
        elif self.cursor.line_index + 1 < self.document.line_count():
            self.cursor.line_index += 1
            self.cursor.column_index = 0

    def move_up(self):
        if self.cursor.line_index > 0:
            offset = self.display_offset()
            self.cursor.line_index -= 1
            self.cursor.column_index = self.column_for_offset(offset)
        else:
            self.cursor.column_index = 0

    def move_down(self):
        if self.cursor.line_index + 1 < self.document.line_count():
            offset = self.display_offset()
            self.cursor.line_index += 1
            self.cursor.column_index = self.column_for_offset(offset)
        else:
            self.cursor.column_index = self._current_length()
