"""OpsLog Archivist - Write-once stack trace files."""

from .storage import StackTraceArchive

__all__ = ["StackTraceArchive"]
