# Shared utilities for all domains. Explicit re-exports for a clean public API.

from .io import (
    ensure_dir as ensure_dir,
    load_json as load_json,
    load_yaml as load_yaml,
    save_json as save_json,
    save_yaml as save_yaml,
)
from .logs import LOG_FORMAT as LOG_FORMAT, get_logger as get_logger
from .timers import Timer as Timer, timed as timed

__all__ = [
    "ensure_dir",
    "load_json",
    "load_yaml",
    "save_json",
    "save_yaml",
    "LOG_FORMAT",
    "get_logger",
    "Timer",
    "timed",
]
