"""Display width lookup for characters."""

from abc import ABC, abstractmethod

from wcwidth import wcwidth

from .constants import EditorConstants


class WidthTable(ABC):
    """Answers how many terminal cells a character occupies."""

    @abstractmethod
    def width_of(self, char: str) -> int:
        """Return the display width of a single character."""


class UnicodeWidthTable(WidthTable):
    """East-Asian-width-aware widths backed by wcwidth.

    Tabs are a fixed width. Characters wcwidth cannot measure (control
    characters) fall back to the default width.
    """

    def __init__(self, tab_width: int = EditorConstants.TAB_WIDTH):
        self.tab_width = tab_width

    def width_of(self, char: str) -> int:
        if char == "\t":
            return self.tab_width
        width = wcwidth(char)
        if width < 0:
            return EditorConstants.DEFAULT_CHAR_WIDTH
        return width


def display_width(text: str, table: WidthTable) -> int:
    """Sum of the display widths of every character in `text`."""
    return sum(table.width_of(ch) for ch in text)


def column_for_offset(text: str, offset: int, table: WidthTable) -> int:
    """Inverse of `display_width` on prefixes.

    Scans left to right and returns the index of the first character whose
    inclusion would push the cumulative width past `offset`, or len(text)
    when no character does.
    """
    real_column = 0
    for index, ch in enumerate(text):
        real_column += table.width_of(ch)
        if real_column > offset:
            return index
    return len(text)
