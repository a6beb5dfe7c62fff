__all__ = [
    "Logger", "SupportsLog", "get_logger", "init", "configure_from_env",
    "Level", "OutputFormat", "PrintSource",
    "ClogError", "SinkWriteError", "SerializationError", "ConfigError", "UnsupportedFormatError",
    "copy", "set_level", "set_writer", "set_prefix", "set_time_format",
    "enable_color", "disable_color", "enable_diffs", "disable_diffs",
    "enable_pid", "disable_pid", "set_uuid", "enable_span_trace", "disable_span_trace",
    "set_print_source", "set_output_format", "use_own_lock",
    "debug", "info", "warn", "warning", "error", "fatal",
]
__version__ = "0.1.0"

from .errors import ClogError, SinkWriteError, SerializationError, ConfigError, UnsupportedFormatError
from .levels import Level, OutputFormat, PrintSource
from .logging import Logger, SupportsLog, get_logger
from .bootstrap import init, configure_from_env
from .facade import (
    copy, set_level, set_writer, set_prefix, set_time_format,
    enable_color, disable_color, enable_diffs, disable_diffs,
    enable_pid, disable_pid, set_uuid, enable_span_trace, disable_span_trace,
    set_print_source, set_output_format, use_own_lock,
    debug, info, warn, warning, error, fatal,
)
