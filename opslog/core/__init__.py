"""OpsLog Core - Failure model, trace rendering and configuration."""

from .config import OpsLogConfig, get_opslog_config, reset_opslog_config
from .rendering import format_failure
from .types import FailureInfo, StackFrame, MAX_CAUSE_DEPTH

__all__ = [
    "OpsLogConfig",
    "get_opslog_config",
    "reset_opslog_config",
    "format_failure",
    "FailureInfo",
    "StackFrame",
    "MAX_CAUSE_DEPTH",
]
