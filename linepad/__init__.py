"""Linepad - a minimal full-screen terminal text editor."""

import logging

from .document import Document
from .cursor import CursorNavigator, CursorPosition
from .viewport import Viewport
from .width import UnicodeWidthTable, WidthTable

# Nothing is logged to the terminal unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Document',
    'CursorNavigator',
    'CursorPosition',
    'Viewport',
    'UnicodeWidthTable',
    'WidthTable',
]
