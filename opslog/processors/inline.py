"""
Inline Stack Traces
===================
Renders the whole trace into the log line. Used when no archive directory
is configured, e.g. when logging straight to a console.
"""

from typing import TextIO, Union

from ..core.rendering import format_failure
from ..core.types import FailureInfo
from .base import StackTraceProcessor


class SimpleStackTraceProcessor(StackTraceProcessor):
    """Multi-line trace with causes, no trailing newline, nothing stored."""

    def process(self, failure: Union[FailureInfo, BaseException], output: TextIO) -> None:
        output.write(format_failure(FailureInfo.coerce(failure)))
