"""Minimal levelled logging to standard output."""

import sys
from enum import Enum


class Level(Enum):
    """Severity of a log message."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


def init():
    """Prepare logging by making standard output flush on every line."""
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(line_buffering=True)


def level_to_string(level):
    """Return the display name of a level, or "UNKNOWN" for anything else."""
    if isinstance(level, Level):
        return level.value
    return "UNKNOWN"


def log(level, message):
    """Write a message to standard output, prefixed with its level."""
    print(f"[{level_to_string(level)}] {message}", flush=True)