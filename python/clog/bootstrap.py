# Keyword and environment configuration for a Logger (the default one unless told otherwise).
from __future__ import annotations
import os
from typing import Optional, Mapping, Any

from .errors import ConfigError
from .logging import Logger, get_logger

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}

ENV_VARS = {
    "CLOG_LEVEL": "level",
    "CLOG_FORMAT": "output_format",
    "CLOG_PREFIX": "prefix",
    "CLOG_TIME_FORMAT": "time_format",
    "CLOG_COLOR": "color",
    "CLOG_DIFFS": "diffs",
    "CLOG_PID": "pid",
    "CLOG_UUID": "uuid",
    "CLOG_SOURCE": "print_source",
}
_BOOL_SETTINGS = {"color", "diffs", "pid"}


def init(
    level: Any = None,
    writer: Any = None,
    prefix: Optional[str] = None,
    time_format: Optional[str] = None,
    color: Optional[bool] = None,
    diffs: Optional[bool] = None,
    pid: Optional[bool] = None,
    uuid: Optional[str] = None,
    print_source: Any = None,
    output_format: Any = None,
    own_lock: Optional[bool] = None,
    logger: Optional[Logger] = None,
) -> Logger:
    """Apply every setting that is not None and return the configured logger.

    Settings left as None keep their current value. ``own_lock=True`` switches
    to an instance-local lock; there is no way back to the shared one.
    """
    log = logger if logger is not None else get_logger()
    if level is not None:
        log.set_level(level)
    if writer is not None:
        log.set_writer(writer)
    if prefix is not None:
        log.set_prefix(prefix)
    if time_format is not None:
        log.set_time_format(time_format)
    if color:
        log.enable_color()
    elif color is not None:
        log.disable_color()
    if diffs:
        log.enable_diffs()
    elif diffs is not None:
        log.disable_diffs()
    if pid:
        log.enable_pid()
    elif pid is not None:
        log.disable_pid()
    if uuid is not None:
        log.set_uuid(uuid)
    if print_source is not None:
        log.set_print_source(print_source)
    if output_format is not None:
        log.set_output_format(output_format)
    if own_lock:
        log.use_own_lock()
    return log


def _parse_bool(name: str, raw: str) -> bool:
    val = raw.strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    raise ConfigError(f"{name}: expected a boolean, got {raw!r}")


def configure_from_env(logger: Optional[Logger] = None, environ: Optional[Mapping[str, str]] = None) -> Logger:
    """Configure from CLOG_* variables (os.environ by default). Unset variables are ignored."""
    env = os.environ if environ is None else environ
    settings: dict[str, Any] = {}
    for var, key in ENV_VARS.items():
        raw = env.get(var)
        if raw is None:
            continue
        settings[key] = _parse_bool(var, raw) if key in _BOOL_SETTINGS else raw
    return init(logger=logger, **settings)
