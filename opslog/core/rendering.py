"""
Trace Rendering
===============
Full multi-line rendering of a FailureInfo, in Python traceback style.
"""

from typing import List

from .types import CAUSE, CONTEXT, MEMBER, FailureInfo

_CHAIN_HEADERS = {
    CAUSE: "The above exception was the direct cause of the following exception:",
    CONTEXT: "During handling of the above exception, another exception occurred:",
    MEMBER: "The above exception was raised within the following exception group:",
}


def format_failure(failure: FailureInfo) -> str:
    """
    Render a failure with all of its causes.

    Causes come first, oldest first, each followed by the header linking it to
    the failure that holds it. The result has no trailing newline.
    """
    lines: List[str] = []
    _append_failure(failure, lines)
    return "\n".join(lines)


def _append_failure(failure: FailureInfo, lines: List[str]) -> None:
    for cause in failure.causes:
        _append_failure(cause, lines)
        lines.append("")
        lines.append(_CHAIN_HEADERS.get(cause.relation, _CHAIN_HEADERS[CAUSE]))
        lines.append("")

    if failure.frames:
        lines.append("Traceback (most recent call last):")
        for frame in failure.frames:
            location = f'  File "{frame.filename}"'
            if frame.lineno is not None:
                location += f", line {frame.lineno}"
            lines.append(f"{location}, in {frame.function}")
            if frame.line:
                lines.append(f"    {frame.line.strip()}")

    lines.append(format_exception_line(failure))


def format_exception_line(failure: FailureInfo) -> str:
    """`Kind: message`, or just `Kind` when there is no message."""
    if failure.message:
        return f"{failure.kind}: {failure.message}"
    return failure.kind
