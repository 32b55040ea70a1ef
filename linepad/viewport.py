"""Vertical window onto the document."""

from enum import Enum


class HeightChange(Enum):
    """How the visible region changed during a viewport update."""
    NONE = "none"
    GROW = "grow"
    SHRINK = "shrink"


class Viewport:
    view_pos: int = 0  # First visible document line
    current_view_height: int = 0  # Height used by the last update; 0 before the first

    def __init__(self):
        self.view_pos = 0
        self.current_view_height = 0

    @staticmethod
    def visible_height(terminal_height: int, document_height: int) -> int:
        return max(1, min(terminal_height, document_height))

    def update(self, terminal_height: int, document_height: int, cursor_line: int) -> HeightChange:
        """Recompute the visible height and scroll so the cursor line is shown.

        Returns whether the visible region grew or shrank since the previous
        update, so the caller can reserve or release terminal rows.
        """
        view_height = self.visible_height(terminal_height, document_height)

        change = HeightChange.NONE
        if view_height != self.current_view_height:
            if view_height > self.current_view_height:
                change = HeightChange.GROW
            else:
                change = HeightChange.SHRINK
            self.current_view_height = view_height

        if self.view_pos > cursor_line:
            self.view_pos = cursor_line
        if self.view_pos + view_height > document_height:
            self.view_pos -= self.view_pos + view_height - document_height
        if cursor_line > self.view_pos + view_height - 1:
            self.view_pos = cursor_line - view_height + 1

        return change

    @property
    def height(self) -> int:
        return self.current_view_height

    def visible_range(self) -> range:
        """Document line indexes currently on screen."""
        return range(self.view_pos, self.view_pos + self.current_view_height)

    def screen_row(self, line_index: int) -> int:
        return line_index - self.view_pos
