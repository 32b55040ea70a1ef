"""Line-oriented text buffer."""

from typing import Optional


def split_lines(text: str) -> list[str]:
    """Split text into lines without their line endings.

    A line ends at '\\n' or '\\r\\n'; a final line ending is optional and
    does not start a new line. A bare '\\r' stays in the line. Empty text
    yields one empty line.
    """
    lines = text.split("\n")
    # Whatever follows the last '\n' has no line ending of its own
    last = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        lines.append(last)
    return lines or [""]


class Document:
    lines: list[str]

    def __init__(self, lines: Optional[list[str]] = None):
        self.lines = list(lines) if lines else [""]

    @classmethod
    def from_text(cls, text: str) -> "Document":
        return cls(split_lines(text))

    def text(self) -> str:
        """Serialize the document; lines are joined with '\\n', no trailing break."""
        return "\n".join(self.lines)

    def line(self, index: int) -> str:
        return self.lines[index]

    def line_count(self) -> int:
        return len(self.lines)

    def line_length(self, index: int) -> int:
        return len(self.lines[index])

    def insert(self, line: int, col: int, char: str):
        current = self.lines[line]
        self.lines[line] = current[:col] + char + current[col:]

    def split(self, line: int, col: int):
        """Break `line` at `col`, moving the remainder to a new following line."""
        current = self.lines[line]
        self.lines[line] = current[:col]
        self.lines.insert(line + 1, current[col:])

    def join(self, line: int) -> int:
        """Append line `line` to the previous line and remove it.

        Returns the length the previous line had before the join, which is
        where the joined text starts.
        """
        removed = self.lines.pop(line)
        join_col = len(self.lines[line - 1])
        self.lines[line - 1] += removed
        return join_col

    def remove(self, line: int, col: int):
        """Remove the character just before `col`."""
        current = self.lines[line]
        self.lines[line] = current[:col - 1] + current[col:]
