"""
Stack Trace Storage
===================
Write-once file archive of rendered stack traces, keyed by fingerprint.

Concurrency: no locks and no in-memory index. The exclusive-create open mode
("x") is the only synchronization point, so any number of threads or
processes may archive into the same directory. The first creator of a file
writes it; everybody else reuses it.
"""

import re
from pathlib import Path
from typing import Union

from ..core.rendering import format_failure
from ..core.types import FailureInfo

ARCHIVE_PREFIX = "stacktrace"
ARCHIVE_SEPARATOR = "_"
ARCHIVE_SUFFIX = ".txt"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_.\-]")


class StackTraceArchive:
    """Archives one file per distinct failure fingerprint under `destination`."""

    def __init__(self, destination: Union[str, Path]):
        self.destination = Path(destination)

    def archive_path_for(self, kind: str, fingerprint: str) -> Path:
        """Deterministic archive location for a failure kind and fingerprint."""
        safe_kind = _UNSAFE_FILENAME_CHARS.sub("_", kind)
        filename = ARCHIVE_SEPARATOR.join((ARCHIVE_PREFIX, safe_kind, fingerprint)) + ARCHIVE_SUFFIX
        return self.destination / filename

    def ensure_archived(self, failure: Union[FailureInfo, BaseException], fingerprint: str) -> str:
        """
        Make sure the rendered trace for `fingerprint` exists on disk.

        Args:
            failure: exception or FailureInfo snapshot to render
            fingerprint: content fingerprint of `failure`

        Returns:
            file:// URI of the archive file

        Raises:
            OSError: on any I/O failure other than losing the creation race
        """
        failure = FailureInfo.coerce(failure)
        path = self.archive_path_for(failure.kind, fingerprint)

        # Names are content derived, so an existing file already holds this trace.
        if not path.exists():
            self._write_once(path, failure)

        return path.resolve().as_uri()

    @staticmethod
    def _write_once(path: Path, failure: FailureInfo) -> None:
        content = format_failure(failure)
        try:
            f = open(path, "x", encoding="utf-8", errors="backslashreplace", newline="")
        except FileExistsError:
            # another writer created it first and is writing (or has written) it
            return

        try:
            with f:
                f.write(content)
        except BaseException:
            # only the creator reaches this; never leave a partial trace behind
            path.unlink(missing_ok=True)
            raise
