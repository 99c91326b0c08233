"""
Stack Trace Processor Contract
==============================
What the logging front-end calls once per failure it needs to embed.
"""

from abc import ABC, abstractmethod
from typing import TextIO, Union

from ..core.types import FailureInfo


class StackTraceProcessor(ABC):
    """Turns a failure into text appended to one log line's buffer."""

    @abstractmethod
    def process(self, failure: Union[FailureInfo, BaseException], output: TextIO) -> None:
        """
        Append the text standing in for `failure` to `output`.

        `output` belongs to the caller for the duration of the call and is
        only ever appended to.
        """
