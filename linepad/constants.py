"""Constants and configuration for the linepad editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Character widths
    TAB_WIDTH = 4  # Display cells occupied by a tab character
    TAB_RENDERING = " " * TAB_WIDTH  # Drawn instead of the raw tab byte
    DEFAULT_CHAR_WIDTH = 1  # Used when the width table has no answer

    # Gutter layout
    GUTTER_LEFT_PADDING = 1  # Blank column before the line numbers
    GUTTER_SEPARATOR = " "  # Between line numbers and content

    # Terminal output
    LINE_SEPARATOR = "\r\n"  # Raw mode does not translate bare newlines
    CURSOR_QUERY_TIMEOUT = 2.0  # Seconds to wait for a cursor position report

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize

    # Exit confirmation
    SAVE_PROMPT = "Do you want to save the file?\r\nSelect y[es]/n[o]"
    CONFIRM_YES = "y"
    CONFIRM_NO = "n"
