"""
OpsLog - Deduplicated Stack Trace Archival
==========================================
Fingerprints failures by content, archives each unique stack trace once,
and replaces the inline trace with a short substitute message.

Version: 1.0
Architecture: Library (called by the logging front-end once per failure)
"""

__version__ = "1.0.0"

from .core.config import OpsLogConfig
from .core.types import FailureInfo, StackFrame
from .processors import (
    FilesystemStackTraceProcessor,
    SimpleStackTraceProcessor,
    StackTraceProcessor,
)
from .bootstrap import build_stack_trace_processor

__all__ = [
    "OpsLogConfig",
    "FailureInfo",
    "StackFrame",
    "StackTraceProcessor",
    "SimpleStackTraceProcessor",
    "FilesystemStackTraceProcessor",
    "build_stack_trace_processor",
]
