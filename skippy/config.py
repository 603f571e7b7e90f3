from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional


# Defaults
_DEFAULT_HISTORY_FILE = Path.home() / '.skippy_history'
_DEFAULT_HISTORY_LENGTH = 1000
_DEFAULT_LOG_LEVEL = 'WARNING'


def path_from_env(var: str, default: Path) -> Optional[Path]:
    raw = os.environ.get(var)
    if raw is None:
        return default
    raw = raw.strip()
    # set but empty disables the file
    return Path(raw).expanduser() if raw else None


def get_history_file() -> Optional[Path]:
    return path_from_env('SKIPPY_HISTORY_FILE', _DEFAULT_HISTORY_FILE)


def get_history_length() -> int:
    raw = os.environ.get('SKIPPY_HISTORY_LENGTH', '').strip()
    try:
        return int(raw) if raw else _DEFAULT_HISTORY_LENGTH
    except ValueError:
        return _DEFAULT_HISTORY_LENGTH


def get_log_level() -> str:
    level = os.environ.get('SKIPPY_LOG_LEVEL', '').strip().upper()
    # getLevelName maps known names to ints and anything else to a string
    if not level or not isinstance(logging.getLevelName(level), int):
        return _DEFAULT_LOG_LEVEL
    return level
