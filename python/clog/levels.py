# Level, output format and source-print enums plus the ANSI colors used for text output.

from __future__ import annotations
from enum import IntEnum
from typing import Any

from .errors import ConfigError

RESTORE = "\033[0m"
RED = "\033[00;31m"
YELLOW = "\033[00;33m"
BLUE = "\033[00;34m"
PURPLE = "\033[00;35m"


def _parse(enum_cls: type[IntEnum], value: Any, aliases: dict[str, IntEnum]) -> Any:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        if key in aliases:
            return aliases[key]
        try:
            return enum_cls[key.upper()]
        except KeyError:
            pass
    elif isinstance(value, int) and not isinstance(value, bool):
        try:
            return enum_cls(value)
        except ValueError:
            pass
    raise ConfigError(f"invalid {enum_cls.__name__}: {value!r}")


class Level(IntEnum):
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5

    @classmethod
    def parse(cls, value: Any) -> "Level":
        """Accept a Level, its int value or a case-insensitive name ("warning" and "critical" too)."""
        return _parse(cls, value, {"warning": cls.WARN, "critical": cls.FATAL})

    @property
    def color(self) -> str:
        return _COLORS[self]

    def colored(self) -> str:
        return f"{self.color}{self.name}{RESTORE}"


_COLORS = {
    Level.DEBUG: PURPLE,
    Level.INFO: BLUE,
    Level.WARN: YELLOW,
    Level.ERROR: RED,
    Level.FATAL: RED,
}


class OutputFormat(IntEnum):
    TEXT = 1
    JSON = 2
    JSON_INDENT = 3

    @classmethod
    def parse(cls, value: Any) -> "OutputFormat":
        return _parse(cls, value, {"std": cls.TEXT, "json-indent": cls.JSON_INDENT})


class PrintSource(IntEnum):
    DISABLE = 1
    FILE = 2
    FULL_PATH = 3

    @classmethod
    def parse(cls, value: Any) -> "PrintSource":
        return _parse(cls, value, {"off": cls.DISABLE, "none": cls.DISABLE, "full": cls.FULL_PATH, "full-path": cls.FULL_PATH})
