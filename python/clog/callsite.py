# Caller-location provider. Depth is always explicit: each entry path supplies its own skip.

from __future__ import annotations
import os
import sys

UNKNOWN_FILE = "???"


def caller_location(skip: int) -> tuple[str, int]:
    """Return (filename, lineno) of the frame `skip` levels above the caller.

    skip=0 is the function calling caller_location itself. Falls back to
    ("???", 0) when the stack is not that deep.
    """
    try:
        frame = sys._getframe(skip + 1)
    except ValueError:
        return UNKNOWN_FILE, 0
    return frame.f_code.co_filename, frame.f_lineno


def basename(path: str) -> str:
    return os.path.basename(path) or path
