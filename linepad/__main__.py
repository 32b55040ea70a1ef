"""Linepad CLI entry point.

Allows running via `python -m linepad` and provides the console script
defined in `pyproject.toml`.

Usage:
    linepad FILE
    linepad --version
"""

from __future__ import annotations

import logging
import os
import sys
import tempfile

from .settings import EditorSettings, load_settings
from .version import get_version_string

logger = logging.getLogger(__name__)

USAGE = "usage: linepad FILE\n       linepad --version"


def configure_logging(settings: EditorSettings) -> None:
    """Send log records to the configured file; the terminal belongs to the editor."""
    if not settings.log_file:
        return
    handler = logging.FileHandler(settings.log_file, encoding='utf-8')
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    package_logger = logging.getLogger("linepad")
    package_logger.addHandler(handler)
    package_logger.setLevel(settings.log_level)


def load_file(filename: str) -> str:
    """Read the file to edit; a missing file starts an empty document."""
    try:
        with open(filename, 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        logger.info("%s does not exist, starting empty", filename)
        return ""


def save_file(filename: str, content: str) -> None:
    """Write content atomically: temp file in the same directory, then rename.

    Raises:
        OSError: if the file cannot be written. The original file is left
            untouched in that case.
    """
    dir_name = os.path.dirname(filename) or '.'
    suffix = os.path.splitext(filename)[1]
    with tempfile.NamedTemporaryFile(mode='w', encoding='utf-8', dir=dir_name,
                                     suffix=suffix, delete=False) as temp_file:
        temp_filename = temp_file.name
        try:
            temp_file.write(content)
            temp_file.flush()
            os.fsync(temp_file.fileno())
        except OSError:
            temp_file.close()
            os.remove(temp_filename)
            raise
    os.replace(temp_filename, filename)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if len(args) != 1 or args[0].startswith('-'):
        print(USAGE, file=sys.stderr)
        return 2
    filename = args[0]

    try:
        configure_logging(load_settings())
    except OSError as e:
        print(f"Error opening log file: {e}", file=sys.stderr)
        return 1

    try:
        text = load_file(filename)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error loading file: {e}", file=sys.stderr)
        return 1

    # Lazy import to avoid importing terminal deps for --version
    from .editor import Editor
    from .terminal import TerminalError

    try:
        result = Editor(text).run()
    except TerminalError as e:
        logger.error("session aborted: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if result.save:
        try:
            save_file(filename, result.content)
        except OSError as e:
            print(f"Error: cannot save to {filename}: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
