# Leveled, prefixable, colorized / JSON log writer with a process-wide default instance.
#
# Every mutator and every emit takes the instance's lock for its whole duration.
# By default that is _writer_lock, shared by all instances, so several loggers
# can write one sink without interleaving lines. use_own_lock() trades that
# guarantee for independence from other instances.

from __future__ import annotations
import contextlib
import io
import os
import sys
import threading
import time
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from .callsite import basename, caller_location
from .errors import ConfigError, SinkWriteError, SerializationError
from .levels import Level, OutputFormat, PrintSource
from .record import Record, encode
from .tracing import current_trace_id

DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S.%f"

_writer_lock = threading.Lock()


@runtime_checkable
class SupportsLog(Protocol):
    def debug(self, template: str, *args: Any, stacklevel: int = 1) -> None: ...
    def info(self, template: str, *args: Any, stacklevel: int = 1) -> None: ...
    def warn(self, template: str, *args: Any, stacklevel: int = 1) -> None: ...
    def error(self, template: str, *args: Any, stacklevel: int = 1) -> None: ...


def _sprintf(template: str, args: tuple) -> str:
    if not args:
        return str(template)
    if len(args) == 1 and isinstance(args[0], Mapping):
        args = args[0]
    try:
        return template % args
    except (TypeError, ValueError, KeyError):
        return f"{template} %!(BADARGS {args!r})"


def _format_time(now_ns: int, pattern: str) -> str:
    secs, rem = divmod(now_ns, 1_000_000_000)
    return datetime.fromtimestamp(secs).replace(microsecond=rem // 1_000).strftime(pattern)


class Logger:
    """A log writer with its own configuration.

    Defaults: DEBUG threshold, sys.stderr sink, no color, file:line source,
    plain text, no prefix, no diffs, no pid, no trace id, shared lock.
    Pass ``lock`` to inject a lock handle other than the shared one.
    """

    def __init__(self, lock: Any = None):
        self._lock = lock if lock is not None else _writer_lock
        self._own_lock = False
        self._pid = os.getpid()
        self._print_pid = False
        self._level = Level.DEBUG
        self._writer: Any = sys.stderr
        self._prev_ns = 0
        self._print_diffs = False
        self._print_source = PrintSource.FILE
        self._prefix = ""
        self._color = False
        self._time_format = DEFAULT_TIME_FORMAT
        self._output_format: Any = OutputFormat.TEXT
        self._uuid = ""
        self._span_trace = False

    @contextlib.contextmanager
    def _locked(self):
        # use_own_lock() may swap self._lock while others wait on the old one;
        # whoever wakes up holding a stale lock drops it and retries on the current one.
        while True:
            lock = self._lock
            lock.acquire()
            if lock is self._lock:
                break
            lock.release()
        try:
            yield
        finally:
            lock.release()

    # ---- read-only views ----

    @property
    def level(self) -> Level:
        return self._level

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def uuid(self) -> str:
        return self._uuid

    @property
    def output_format(self) -> Any:
        return self._output_format

    @property
    def writer(self) -> Any:
        return self._writer

    @property
    def pid(self) -> int:
        return self._pid

    def is_enabled_for(self, level: Any) -> bool:
        return Level.parse(level) >= self._level

    # ---- configuration, each returns self for chaining ----

    def copy(self) -> "Logger":
        """Independent clone of the configuration; the previous emit time is not carried over."""
        with self._locked():
            clone = Logger(lock=threading.Lock() if self._own_lock else self._lock)
            clone._own_lock = self._own_lock
            clone._pid = self._pid
            clone._print_pid = self._print_pid
            clone._level = self._level
            clone._writer = self._writer
            clone._print_diffs = self._print_diffs
            clone._print_source = self._print_source
            clone._prefix = self._prefix
            clone._color = self._color
            clone._time_format = self._time_format
            clone._output_format = self._output_format
            clone._uuid = self._uuid
            clone._span_trace = self._span_trace
        return clone

    def set_level(self, level: Any) -> "Logger":
        level = Level.parse(level)
        with self._locked():
            self._level = level
        return self

    def set_writer(self, writer: Any) -> "Logger":
        if not callable(getattr(writer, "write", None)):
            raise ConfigError(f"writer has no write(): {writer!r}")
        with self._locked():
            self._writer = writer
        return self

    def set_prefix(self, prefix: str) -> "Logger":
        with self._locked():
            self._prefix = prefix or ""
        return self

    def set_time_format(self, pattern: str) -> "Logger":
        if not isinstance(pattern, str):
            raise ConfigError(f"time format must be a strftime pattern, got {pattern!r}")
        with self._locked():
            self._time_format = pattern
        return self

    def enable_color(self) -> "Logger":
        with self._locked():
            self._color = True
        return self

    def disable_color(self) -> "Logger":
        with self._locked():
            self._color = False
        return self

    def enable_diffs(self) -> "Logger":
        """Append the time since this instance's previous line. The first line after enabling reports 0s."""
        with self._locked():
            self._print_diffs = True
            self._prev_ns = 0
        return self

    def disable_diffs(self) -> "Logger":
        with self._locked():
            self._print_diffs = False
        return self

    def enable_pid(self) -> "Logger":
        with self._locked():
            self._print_pid = True
        return self

    def disable_pid(self) -> "Logger":
        with self._locked():
            self._print_pid = False
        return self

    def set_uuid(self, uuid: str) -> "Logger":
        with self._locked():
            self._uuid = uuid or ""
        return self

    def enable_span_trace(self) -> "Logger":
        """Use the active OpenTelemetry span's trace id whenever no uuid is set."""
        with self._locked():
            self._span_trace = True
        return self

    def disable_span_trace(self) -> "Logger":
        with self._locked():
            self._span_trace = False
        return self

    def set_print_source(self, print_source: Any) -> "Logger":
        print_source = PrintSource.parse(print_source)
        with self._locked():
            self._print_source = print_source
        return self

    def set_output_format(self, output_format: Any) -> "Logger":
        # An int outside OutputFormat is kept as-is and rejected when a line is emitted.
        try:
            output_format = OutputFormat.parse(output_format)
        except ConfigError:
            if not isinstance(output_format, int) or isinstance(output_format, bool):
                raise
        with self._locked():
            self._output_format = output_format
        return self

    def use_own_lock(self) -> "Logger":
        """Stop sharing the process-wide writer lock.

        Lines from this instance may then interleave with lines other
        instances write to the same sink.
        """
        with self._locked():
            if not self._own_lock:
                self._lock = threading.Lock()
                self._own_lock = True
        return self

    # ---- emit ----

    def debug(self, template: str, *args: Any, stacklevel: int = 1) -> None:
        self._log(Level.DEBUG, template, args, stacklevel)

    def info(self, template: str, *args: Any, stacklevel: int = 1) -> None:
        self._log(Level.INFO, template, args, stacklevel)

    def warn(self, template: str, *args: Any, stacklevel: int = 1) -> None:
        self._log(Level.WARN, template, args, stacklevel)

    warning = warn

    def error(self, template: str, *args: Any, stacklevel: int = 1) -> None:
        self._log(Level.ERROR, template, args, stacklevel)

    def fatal(self, template: str, *args: Any, stacklevel: int = 1) -> None:
        """Emit at FATAL (if the threshold admits it), flush the sink and end the process with status 1.

        Uses os._exit, so it terminates from any thread and cannot be caught;
        atexit hooks and finally blocks do not run. Any error raised while
        emitting or flushing is discarded.
        """
        with contextlib.suppress(Exception):
            self._log(Level.FATAL, template, args, stacklevel)
        with contextlib.suppress(Exception):
            with self._locked():
                writer = self._writer
            flush = getattr(writer, "flush", None)
            if flush is not None:
                flush()
        os._exit(1)

    def _log(self, level: Level, template: str, args: tuple, stacklevel: int) -> None:
        # stacklevel 1 is whoever called debug()/info()/...; +1 skips this frame.
        with self._locked():
            if level < self._level:
                return

            now_ns = time.time_ns()
            file, line = caller_location(stacklevel + 1)
            if self._print_source is PrintSource.DISABLE:
                file, line = "", 0
            elif self._print_source is PrintSource.FILE:
                file = basename(file)

            diff_ns = None
            if self._print_diffs:
                diff_ns = now_ns - self._prev_ns if self._prev_ns else 0

            rec = Record(
                time=_format_time(now_ns, self._time_format),
                file=file,
                line=line,
                prefix=self._prefix,
                level=level,
                msg=_sprintf(template, args),
                diff_ns=diff_ns,
                pid=self._pid if self._print_pid else 0,
                uuid=self._uuid or (current_trace_id() if self._span_trace else ""),
            )
            text = encode(rec, self._output_format, self._color)

            writer = self._writer
            if isinstance(writer, io.TextIOBase):
                payload: Any = text
            else:
                try:
                    payload = text.encode("utf-8")
                except UnicodeEncodeError as e:
                    raise SerializationError(f"utf-8 encode error:{e}") from e

            if self._print_diffs:
                self._prev_ns = now_ns
            _write(writer, payload)


def _write(writer: Any, payload: Any) -> None:
    try:
        n = writer.write(payload)
    except Exception as e:
        raise SinkWriteError(0, e) from e
    if n is not None and n < len(payload):
        raise SinkWriteError(n)


_global_logger: Logger = Logger()


def get_logger() -> Logger:
    """The process-wide default instance behind the module-level functions."""
    return _global_logger
