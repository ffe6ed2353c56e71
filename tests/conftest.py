"""
Pytest configuration and shared fixtures for Ocelot tests.
"""

import os
import tempfile
from pathlib import Path
from typing import Dict, Generator, List, Optional

import pytest

from ocelot.exceptions import InvalidArgumentError
from ocelot.sdk.emitter import ERROR_EVENT, EventEmitter


class StubLogger:
    """
    SDK logger that records every message by level.

    ``output`` maps each of ``debug``, ``info``, ``warn`` and ``error`` to the
    list of messages written at that level.
    """

    def __init__(self):
        self.output: Dict[str, List[str]] = {"debug": [], "info": [], "warn": [], "error": []}

    def debug(self, message, *args):
        self.output["debug"].append(message % args if args else message)

    def info(self, message, *args):
        self.output["info"].append(message % args if args else message)

    def warn(self, message, *args):
        self.output["warn"].append(message % args if args else message)

    def error(self, message, *args):
        self.output["error"].append(message % args if args else message)


class ErrorListener:
    """
    Emitter/logger pair with an ``"error"`` subscription, mirroring how an
    SDK wires up the validator.

    The ``expect_*`` helpers flush the emitter first, since errors are only
    delivered after the validation call has returned.
    """

    def __init__(self):
        self.logger = StubLogger()
        self.emitter = EventEmitter(self.logger)
        self.errors: List[InvalidArgumentError] = []
        self.emitter.on(ERROR_EVENT, self.errors.append)

    def expect_no_errors(self):
        self.emitter.flush()
        assert self.errors == []
        assert self.logger.output["error"] == []

    def expect_error(self, message: Optional[str] = None):
        self.emitter.flush()
        assert len(self.errors) == 1
        error = self.errors[0]
        if message is not None:
            assert error == InvalidArgumentError(message)
        else:
            assert error.name == "OcelotInvalidArgumentError"

    def expect_warning_only(self, message: str):
        self.emitter.flush()
        assert self.errors == []
        assert message in self.logger.output["warn"]


@pytest.fixture
def stub_logger() -> StubLogger:
    return StubLogger()


@pytest.fixture
def listener() -> ErrorListener:
    return ErrorListener()


@pytest.fixture
def make_listener():
    """Factory for tests that need several independent listeners."""
    return ErrorListener


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory that is cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_yaml(temp_dir: Path):
    """
    Factory fixture writing YAML text to a file in ``temp_dir``.

    Usage:
        def test_something(write_yaml):
            path = write_yaml("eventCapacity: 200\\n")
    """
    def _write(content: str, name: str = "ocelot.yaml") -> Path:
        path = temp_dir / name
        path.write_text(content)
        return path
    return _write


# Hypothesis settings for property-based tests
from hypothesis import settings, Verbosity

settings.register_profile("ocelot", max_examples=100, verbosity=Verbosity.normal)
settings.register_profile("ocelot-ci", max_examples=1000, verbosity=Verbosity.verbose)
settings.register_profile("ocelot-dev", max_examples=10, verbosity=Verbosity.verbose)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ocelot"))
