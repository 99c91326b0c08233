"""
Shared fixtures for OpsLog tests.
"""

import pytest
import structlog

from opslog.core.config import reset_opslog_config
from opslog.core.types import FailureInfo, StackFrame


def make_failure(
    kind="RuntimeError",
    message="boom",
    frames=None,
    causes=(),
    relation="cause",
) -> FailureInfo:
    """Build a FailureInfo with two default frames."""
    if frames is None:
        frames = (
            StackFrame("handle_request", "/srv/app/api.py", 42),
            StackFrame("load_player", "/srv/app/players.py", 17),
        )
    return FailureInfo(
        kind=kind,
        message=message,
        frames=tuple(frames),
        causes=tuple(causes),
        relation=relation,
    )


def raise_from_helper(message="boom"):
    """Raise a RuntimeError from a fixed call site."""
    raise RuntimeError(message)


def caught(func, *args):
    """Call func and return the exception it raises."""
    try:
        func(*args)
    except BaseException as e:
        return e
    raise AssertionError("expected an exception")


@pytest.fixture(autouse=True)
def clean_global_state(monkeypatch):
    """Isolate tests from OPSLOG_* variables and global configuration."""
    for name in (
        "OPSLOG_STACKTRACE_PATH",
        "OPSLOG_FINGERPRINT_ALGORITHM",
        "OPSLOG_LOG_LEVEL",
        "OPSLOG_JSON_LOGS",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_opslog_config()
    yield
    reset_opslog_config()
    structlog.reset_defaults()


@pytest.fixture
def failure() -> FailureInfo:
    return make_failure()


@pytest.fixture
def archive_dir(tmp_path):
    path = tmp_path / "stacktraces"
    path.mkdir()
    return path
