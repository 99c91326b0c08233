"""
FailureInfo Snapshot Tests
==========================
Snapshotting live exceptions: message, frames, cause chains, groups, cycles.
"""

import dataclasses

import pytest

from opslog.core.types import CAUSE, CONTEXT, MAX_CAUSE_DEPTH, MEMBER, FailureInfo, StackFrame

from conftest import caught, raise_from_helper


def test_snapshot_kind_message_and_frames():
    """Test that a raised exception is captured with its frames, outermost first."""
    exc = caught(raise_from_helper, "boom")

    info = FailureInfo.from_exception(exc)

    assert info.kind == "RuntimeError"
    assert info.message == "boom"
    assert [frame.function for frame in info.frames] == ["caught", "raise_from_helper"]
    assert info.frames[-1].filename.endswith("conftest.py")
    assert info.frames[-1].line == "raise RuntimeError(message)"
    assert info.causes == ()


def test_exception_without_args_has_no_message():
    """Test that an exception without arguments has an absent message, not 'None'."""
    info = FailureInfo.from_exception(ValueError())
    assert info.message is None


def test_exception_with_none_argument_has_no_message():
    assert FailureInfo.from_exception(RuntimeError(None)).message is None
    assert FailureInfo.from_exception(RuntimeError(None, None)).message == "(None, None)"


def test_unraised_exception_has_no_frames():
    """Test that an exception that was never raised is still valid input."""
    info = FailureInfo.from_exception(KeyError("player_id"))
    assert info.frames == ()
    assert info.message == "'player_id'"


def test_explicit_cause_is_captured():
    def wrap():
        try:
            raise_from_helper("db down")
        except RuntimeError as e:
            raise LookupError("player missing") from e

    info = FailureInfo.from_exception(caught(wrap))

    assert info.kind == "LookupError"
    assert len(info.causes) == 1
    assert info.causes[0].kind == "RuntimeError"
    assert info.causes[0].message == "db down"
    assert info.causes[0].relation == CAUSE


def test_implicit_context_is_captured():
    def wrap():
        try:
            raise_from_helper("first")
        except RuntimeError:
            raise ValueError("second")

    info = FailureInfo.from_exception(caught(wrap))

    assert [cause.kind for cause in info.causes] == ["RuntimeError"]
    assert info.causes[0].relation == CONTEXT


def test_suppressed_context_is_ignored():
    def wrap():
        try:
            raise_from_helper("first")
        except RuntimeError:
            raise ValueError("second") from None

    info = FailureInfo.from_exception(caught(wrap))
    assert info.causes == ()


def test_exception_group_members_are_causes():
    group = ExceptionGroup("batch failed", [ValueError("a"), TypeError("b")])

    info = FailureInfo.from_exception(group)

    assert info.kind == "ExceptionGroup"
    assert [(c.kind, c.relation) for c in info.causes] == [
        ("ValueError", MEMBER),
        ("TypeError", MEMBER),
    ]


def test_cyclic_cause_chain_terminates():
    """Test that a cause cycle is cut at the first repeated exception."""
    first = RuntimeError("first")
    second = RuntimeError("second")
    first.__cause__ = second
    second.__cause__ = first

    info = FailureInfo.from_exception(first)

    assert info.causes[0].message == "second"
    assert info.causes[0].causes == ()


def test_cause_depth_is_bounded():
    head = RuntimeError("0")
    current = head
    for i in range(1, MAX_CAUSE_DEPTH + 10):
        nxt = RuntimeError(str(i))
        current.__cause__ = nxt
        current = nxt

    info = FailureInfo.from_exception(head)

    depth = 0
    while info.causes:
        info = info.causes[0]
        depth += 1
    assert depth == MAX_CAUSE_DEPTH


def test_failure_info_is_immutable(failure):
    with pytest.raises(dataclasses.FrozenInstanceError):
        failure.message = "changed"


def test_coerce_accepts_both_forms(failure):
    assert FailureInfo.coerce(failure) is failure
    assert FailureInfo.coerce(ValueError("x")).kind == "ValueError"
    with pytest.raises(TypeError):
        FailureInfo.coerce("not a failure")


def test_frame_identity_ignores_source_text():
    a = StackFrame("f", "/a.py", 1, line="x = 1")
    b = StackFrame("f", "/a.py", 1, line=None)
    assert a.identity() == b.identity()
