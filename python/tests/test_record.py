"""
Test module for clog.record and clog.levels
"""

import json

import pytest

from clog import ConfigError, Level, OutputFormat, PrintSource, SerializationError, UnsupportedFormatError
from clog.record import Record, encode, format_duration


def _record(**overrides):
    fields = dict(time="T", file="app.py", line=7, prefix="", level=Level.INFO, msg="hi")
    fields.update(overrides)
    return Record(**fields)


class TestLevels:

    def test_total_order(self):
        assert Level.DEBUG < Level.INFO < Level.WARN < Level.ERROR < Level.FATAL

    @pytest.mark.parametrize("raw, expected", [
        ("debug", Level.DEBUG),
        ("INFO", Level.INFO),
        ("warning", Level.WARN),
        (" Warn ", Level.WARN),
        ("critical", Level.FATAL),
        (4, Level.ERROR),
        (Level.FATAL, Level.FATAL),
    ])
    def test_parse(self, raw, expected):
        assert Level.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["loud", 0, 6, True, None, 2.0])
    def test_parse_rejects(self, raw):
        with pytest.raises(ConfigError):
            Level.parse(raw)

    def test_format_and_source_aliases(self):
        assert OutputFormat.parse("std") is OutputFormat.TEXT
        assert OutputFormat.parse("json_indent") is OutputFormat.JSON_INDENT
        assert PrintSource.parse("full") is PrintSource.FULL_PATH
        assert PrintSource.parse("off") is PrintSource.DISABLE

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            OutputFormat.parse("xml")


class TestEncode:

    def test_text(self):
        rec = _record(prefix="main", diff_ns=1_500_000, pid=42, uuid="u-1")
        assert encode(rec, OutputFormat.TEXT) == "T app.py:7 (main) [INFO] hi DIFF:1.5ms UUID:u-1 PID:42\n"

    def test_text_colored(self):
        assert "[\033[00;33mWARN\033[0m]" in encode(_record(level=Level.WARN), OutputFormat.TEXT, color=True)

    def test_json_is_compact_single_line(self):
        out = encode(_record(diff_ns=2_900_000), OutputFormat.JSON)
        assert out == '{"time":"T","file":"app.py","line":7,"level":"INFO","msg":"hi","diff":2}\n'

    def test_json_keeps_non_ascii(self):
        out = encode(_record(msg="naïve"), OutputFormat.JSON)
        assert "naïve" in out
        assert json.loads(out)["msg"] == "naïve"

    def test_unsupported(self):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            encode(_record(), 7)
        assert exc_info.value.output_format == 7

    def test_serialization_failure(self):
        with pytest.raises(SerializationError):
            encode(_record(uuid={1, 2}), OutputFormat.JSON_INDENT)


class TestFormatDuration:

    @pytest.mark.parametrize("ns, expected", [
        (0, "0s"),
        (999, "999ns"),
        (750_000, "750µs"),
        (1_234, "1.234µs"),
        (12_500_000, "12.5ms"),
        (2_000_417_000, "2.000417s"),
        (63_200_000_000, "1m3.2s"),
        (3_600_000_000_000, "1h0m0s"),
        (-5_000_000, "-5ms"),
    ])
    def test_go_style(self, ns, expected):
        assert format_duration(ns) == expected
