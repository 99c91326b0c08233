"""
OpsLog Type Definitions
=======================
Immutable snapshots of failures (exceptions) and their stack frames.
"""

import traceback
from dataclasses import dataclass
from typing import Optional, Set, Tuple, Union


# Nesting limit for cause chains; anything deeper is cut off.
MAX_CAUSE_DEPTH = 64

# How a nested failure relates to the failure that holds it.
CAUSE = "cause"        # raise ... from exc
CONTEXT = "context"    # raised while handling exc
MEMBER = "member"      # one of the exceptions of an ExceptionGroup


@dataclass(frozen=True)
class StackFrame:
    """One frame of a stack trace, outermost call first."""
    function: str
    filename: str
    lineno: Optional[int] = None
    line: Optional[str] = None  # source text, not part of the frame identity

    def identity(self) -> Tuple[str, str, Optional[int]]:
        return (self.function, self.filename, self.lineno)


@dataclass(frozen=True)
class FailureInfo:
    """
    Content of a failure: kind, message, frames and nested causes.

    A FailureInfo is never mutated once built. `relation` only describes how a
    nested failure is attached to its parent (CAUSE, CONTEXT or MEMBER) and is
    ignored for the outermost failure.
    """
    kind: str
    message: Optional[str] = None
    frames: Tuple[StackFrame, ...] = ()
    causes: Tuple["FailureInfo", ...] = ()
    relation: str = CAUSE

    @classmethod
    def from_exception(cls, exc: BaseException) -> "FailureInfo":
        """Snapshot a live exception, including its cause chain."""
        return _snapshot(exc, CAUSE, seen=set(), depth=0)

    @classmethod
    def coerce(cls, failure: Union["FailureInfo", BaseException]) -> "FailureInfo":
        if isinstance(failure, FailureInfo):
            return failure
        if isinstance(failure, BaseException):
            return cls.from_exception(failure)
        raise TypeError(
            f"expected an exception or FailureInfo, got {type(failure).__name__}"
        )


def _message_of(exc: BaseException) -> Optional[str]:
    if not exc.args or exc.args == (None,):
        return None
    try:
        return str(exc)
    except Exception:
        return "<exception str() failed>"


def _frames_of(exc: BaseException) -> Tuple[StackFrame, ...]:
    if exc.__traceback__ is None:
        return ()
    return tuple(
        StackFrame(
            function=summary.name,
            filename=summary.filename,
            lineno=summary.lineno,
            line=summary.line or None,
        )
        for summary in traceback.extract_tb(exc.__traceback__)
    )


def _snapshot(exc: BaseException, relation: str, seen: Set[int], depth: int) -> FailureInfo:
    seen.add(id(exc))

    nested = []
    if exc.__cause__ is not None:
        nested.append((exc.__cause__, CAUSE))
    elif exc.__context__ is not None and not exc.__suppress_context__:
        nested.append((exc.__context__, CONTEXT))
    if isinstance(exc, BaseExceptionGroup):
        nested.extend((member, MEMBER) for member in exc.exceptions)

    causes = []
    if depth < MAX_CAUSE_DEPTH:
        for child, child_relation in nested:
            if id(child) in seen:
                continue
            causes.append(_snapshot(child, child_relation, seen, depth + 1))

    return FailureInfo(
        kind=type(exc).__name__,
        message=_message_of(exc),
        frames=_frames_of(exc),
        causes=tuple(causes),
        relation=relation,
    )
