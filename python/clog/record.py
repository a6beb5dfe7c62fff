# The fixed-shape log record and its text / JSON encodings.

from __future__ import annotations
import json
from dataclasses import dataclass
from typing import Any, Optional

from .errors import SerializationError, UnsupportedFormatError
from .levels import Level, OutputFormat


@dataclass
class Record:
    time: str
    file: str
    line: int
    prefix: str
    level: Level
    msg: str
    diff_ns: Optional[int] = None  # None when diff printing is off
    pid: int = 0
    uuid: str = ""

    def to_dict(self) -> dict[str, Any]:
        """JSON view of the record; empty and zero fields are left out."""
        rec: dict[str, Any] = {
            "time": self.time,
            "file": self.file,
            "line": self.line,
            "prefix": f"({self.prefix})" if self.prefix else "",
            "level": self.level.name,
            "msg": self.msg,
            "diff": (self.diff_ns or 0) // 1_000_000,
            "pid": self.pid,
            "uuid": self.uuid,
        }
        return {k: v for k, v in rec.items() if v}

    def to_text(self, color: bool = False) -> str:
        source = f"{self.file}:{self.line}" if self.file else ""
        prefix = f" ({self.prefix})" if self.prefix else ""
        level = self.level.colored() if color else self.level.name
        diff = f" DIFF:{format_duration(self.diff_ns)}" if self.diff_ns is not None else ""
        extras = ""
        if self.uuid:
            extras += f" UUID:{self.uuid}"
        if self.pid:
            extras += f" PID:{self.pid}"
        return f"{self.time} {source}{prefix} [{level}] {self.msg}{diff}{extras}\n"


def encode(record: Record, output_format: Any, color: bool = False) -> str:
    """Render a record in the given output format, newline terminated.

    Raises UnsupportedFormatError for an unknown format and SerializationError
    when the JSON encoder rejects a field.
    """
    try:
        fmt = OutputFormat(output_format)
    except (ValueError, TypeError):
        raise UnsupportedFormatError(output_format) from None

    if fmt is OutputFormat.TEXT:
        return record.to_text(color)
    try:
        if fmt is OutputFormat.JSON:
            out = json.dumps(record.to_dict(), separators=(",", ":"), ensure_ascii=False)
        else:
            out = json.dumps(record.to_dict(), indent="\t", ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"json.dumps() error:{e}") from e
    return out + "\n"


def _trim(whole: int, frac: int, width: int) -> str:
    digits = f"{frac:0{width}d}".rstrip("0")
    return f"{whole}.{digits}" if digits else str(whole)


def format_duration(ns: int) -> str:
    """Render nanoseconds the way Go prints a time.Duration (0s, 750µs, 12.5ms, 1m3.2s)."""
    if ns == 0:
        return "0s"
    if ns < 0:
        return "-" + format_duration(-ns)
    if ns < 1_000:
        return f"{ns}ns"
    if ns < 1_000_000:
        return _trim(ns // 1_000, ns % 1_000, 3) + "µs"
    if ns < 1_000_000_000:
        return _trim(ns // 1_000_000, ns % 1_000_000, 6) + "ms"

    secs, frac = divmod(ns, 1_000_000_000)
    hours, secs = divmod(secs, 3600)
    minutes, secs = divmod(secs, 60)
    out = _trim(secs, frac, 9) + "s"
    if hours or minutes:
        out = f"{minutes}m" + out
    if hours:
        out = f"{hours}h" + out
    return out
