import logging

import pytest
import structlog

from tests.kernel.mocks import FakeCommandRunner, FakeFileReader, FakeSysctl


@pytest.fixture(autouse=True)
def reset_logging(monkeypatch):
    """Start every test with unconfigured logging and no logging env overrides."""
    monkeypatch.delenv("CACHEPROBE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CACHEPROBE_LOG_FILE", raising=False)
    monkeypatch.setattr("cacheprobe.internal.logging._LOGGING_CONFIGURED", False)
    yield
    for handler in logging.root.handlers[:]:
        handler.close()
        logging.root.removeHandler(handler)
    logging.root.setLevel(logging.WARNING)
    structlog.reset_defaults()


@pytest.fixture
def runner():
    return FakeCommandRunner()


@pytest.fixture
def reader():
    return FakeFileReader()


@pytest.fixture
def sysctl():
    return FakeSysctl()
