# Exceptions raised by emit and configuration calls. The library never logs these itself.

from __future__ import annotations


class ClogError(Exception):
    """Base class for every error raised by clog."""


class SinkWriteError(ClogError):
    """The sink's write call raised or accepted fewer bytes than the payload."""

    def __init__(self, bytes_written: int, cause: BaseException | None = None):
        self.bytes_written = bytes_written
        detail = f"{type(cause).__name__}: {cause}" if cause is not None else "short write"
        super().__init__(f"writer.write() n:{bytes_written} error:{detail}")


class SerializationError(ClogError):
    """A record could not be serialized; nothing was written."""


class ConfigError(ClogError, ValueError):
    """A configuration value was rejected."""


class UnsupportedFormatError(ConfigError):
    def __init__(self, output_format: object):
        self.output_format = output_format
        super().__init__(f"unsupported output format: {output_format!r}")
