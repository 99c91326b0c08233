"""OpsLog Processors - Inline and archiving stack trace processors."""

from .base import StackTraceProcessor
from .filesystem import FilesystemStackTraceProcessor
from .inline import SimpleStackTraceProcessor
from .substitute import render_substitute

__all__ = [
    "StackTraceProcessor",
    "FilesystemStackTraceProcessor",
    "SimpleStackTraceProcessor",
    "render_substitute",
]
