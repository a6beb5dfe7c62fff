"""Shared pytest fixtures for clog tests."""

import io
import os

import pytest

import clog.logging
from clog import Logger


@pytest.fixture(autouse=True)
def exit_calls(monkeypatch):
    """Replace os._exit so fatal() raises SystemExit instead of ending the test run; records exit codes."""
    calls = []

    def fake_exit(code):
        calls.append(code)
        raise SystemExit(code)

    monkeypatch.setattr(os, "_exit", fake_exit)
    return calls


@pytest.fixture
def buf():
    return io.StringIO()


@pytest.fixture
def logger(buf):
    """Fresh instance writing to an in-memory text buffer with a fixed time string."""
    return Logger().set_writer(buf).set_time_format("T")


@pytest.fixture
def default_logger(monkeypatch, buf):
    """Swap the process-wide default for a fresh one so facade tests don't leak."""
    fresh = Logger().set_writer(buf).set_time_format("T")
    monkeypatch.setattr(clog.logging, "_global_logger", fresh)
    return fresh
