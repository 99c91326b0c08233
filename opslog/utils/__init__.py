"""OpsLog Utilities - Structured logging."""

from .logger import OpsBoundLogger, StackTraceRenderer, configure_logging, get_logger, print_to_stderr

__all__ = ["OpsBoundLogger", "StackTraceRenderer", "configure_logging", "get_logger", "print_to_stderr"]
