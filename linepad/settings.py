"""User settings for the linepad editor.

Settings live in a JSON file in the OS-appropriate config directory and
only cover the editor's ambient behavior (logging). A missing or broken
file is never fatal: problems are logged and defaults are used.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

logger = logging.getLogger(__name__)

LOG_FILE_ENV = "LINEPAD_LOG_FILE"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EditorSettings:
    log_file: Optional[str] = None  # No file logging unless set
    log_level: str = "WARNING"


def settings_path() -> Path:
    """Location of settings.json for the current user."""
    return Path(platformdirs.user_config_dir("linepad")) / "settings.json"


def _read_settings_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load settings from {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning("Settings file has invalid format (not a dict), ignoring")
        return {}
    return data


def load_settings(path: Optional[Path] = None) -> EditorSettings:
    """Load settings, falling back to defaults for anything missing or invalid.

    Args:
        path: Settings file to read. Defaults to `settings_path()`.

    Returns:
        The effective settings, with the LINEPAD_LOG_FILE environment
        variable taking precedence over the file's log_file.
    """
    data = _read_settings_file(path or settings_path())
    settings = EditorSettings()

    log_file = data.get("log_file")
    if log_file is None or isinstance(log_file, str):
        settings.log_file = log_file or None
    else:
        logger.warning(f"Ignoring log_file setting of type {type(log_file).__name__}")

    log_level = data.get("log_level", settings.log_level)
    if isinstance(log_level, str) and log_level.upper() in VALID_LOG_LEVELS:
        settings.log_level = log_level.upper()
    else:
        logger.warning(f"Ignoring invalid log_level setting: {log_level!r}")

    env_log_file = os.environ.get(LOG_FILE_ENV)
    if env_log_file:
        settings.log_file = env_log_file

    return settings
