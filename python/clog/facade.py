# Module-level functions delegating to the default Logger. No state of their own.
#
# Emit functions add one frame between the user and Logger, hence stacklevel + 1.

from __future__ import annotations
from typing import Any

from .logging import Logger, get_logger


def copy() -> Logger:
    return get_logger().copy()


def set_level(level: Any) -> Logger:
    return get_logger().set_level(level)


def set_writer(writer: Any) -> Logger:
    return get_logger().set_writer(writer)


def set_prefix(prefix: str) -> Logger:
    return get_logger().set_prefix(prefix)


def set_time_format(pattern: str) -> Logger:
    return get_logger().set_time_format(pattern)


def enable_color() -> Logger:
    return get_logger().enable_color()


def disable_color() -> Logger:
    return get_logger().disable_color()


def enable_diffs() -> Logger:
    return get_logger().enable_diffs()


def disable_diffs() -> Logger:
    return get_logger().disable_diffs()


def enable_pid() -> Logger:
    return get_logger().enable_pid()


def disable_pid() -> Logger:
    return get_logger().disable_pid()


def set_uuid(uuid: str) -> Logger:
    return get_logger().set_uuid(uuid)


def enable_span_trace() -> Logger:
    return get_logger().enable_span_trace()


def disable_span_trace() -> Logger:
    return get_logger().disable_span_trace()


def set_print_source(print_source: Any) -> Logger:
    return get_logger().set_print_source(print_source)


def set_output_format(output_format: Any) -> Logger:
    return get_logger().set_output_format(output_format)


def use_own_lock() -> Logger:
    return get_logger().use_own_lock()


def debug(template: str, *args: Any, stacklevel: int = 1) -> None:
    get_logger().debug(template, *args, stacklevel=stacklevel + 1)


def info(template: str, *args: Any, stacklevel: int = 1) -> None:
    get_logger().info(template, *args, stacklevel=stacklevel + 1)


def warn(template: str, *args: Any, stacklevel: int = 1) -> None:
    get_logger().warn(template, *args, stacklevel=stacklevel + 1)


warning = warn


def error(template: str, *args: Any, stacklevel: int = 1) -> None:
    get_logger().error(template, *args, stacklevel=stacklevel + 1)


def fatal(template: str, *args: Any, stacklevel: int = 1) -> None:
    get_logger().fatal(template, *args, stacklevel=stacklevel + 1)
