"""
Archived Stack Traces
=====================
Fingerprint -> write-once archive file -> substitute message.
"""

from pathlib import Path
from typing import Optional, TextIO, Union

from ..archivist.storage import StackTraceArchive
from ..core.types import FailureInfo
from ..inquisitor.fingerprint import ContentFingerprintCalculator, FingerprintCalculator
from .base import StackTraceProcessor
from .substitute import render_substitute


class FilesystemStackTraceProcessor(StackTraceProcessor):
    """
    Deduplicating processor.

    Each distinct failure is written once to `destination`; the log line only
    gets the failure message and a file:// URI to the archived trace. I/O
    errors other than a lost creation race propagate to the caller.
    """

    def __init__(
        self,
        destination: Union[str, Path],
        fingerprint_calculator: Optional[FingerprintCalculator] = None,
    ):
        self.archive = StackTraceArchive(destination)
        self.fingerprint_calculator = fingerprint_calculator or ContentFingerprintCalculator()

    @property
    def destination(self) -> Path:
        return self.archive.destination

    def process(self, failure: Union[FailureInfo, BaseException], output: TextIO) -> None:
        failure = FailureInfo.coerce(failure)
        fingerprint = self.fingerprint_calculator.calculate_fingerprint(failure)
        locator = self.archive.ensure_archived(failure, fingerprint)
        render_substitute(failure, locator, output)
