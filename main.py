#!/usr/bin/env python3
"""Linepad - a minimal full-screen terminal text editor.

Usage:
    python main.py FILE

Controls:
    Arrow keys: Navigate cursor (keeps the visual column on up/down)
    Ctrl-S: Save and quit
    Esc: Quit (asks whether to save)
    Type to insert text, Tab inserts a tab
    Backspace / Ctrl-H: Delete character
    Enter: Split line
"""

import sys

from linepad.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
