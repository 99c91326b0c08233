"""
Stack Trace Processor Factory
=============================
Chooses the processor variant once, from configuration.
"""

from typing import Optional

from ..core.config import OpsLogConfig, get_opslog_config
from ..inquisitor.fingerprint import ContentFingerprintCalculator, FingerprintCalculator
from ..processors import (
    FilesystemStackTraceProcessor,
    SimpleStackTraceProcessor,
    StackTraceProcessor,
)
from ..utils.logger import get_logger

logger = get_logger(__name__)


def build_stack_trace_processor(
    config: Optional[OpsLogConfig] = None,
    fingerprint_calculator: Optional[FingerprintCalculator] = None,
) -> StackTraceProcessor:
    """
    Build the processor matching the configuration.

    Without a stack trace path traces are rendered inline. With one, the
    directory (and its parents) is created and traces are archived there.

    Raises:
        ValueError: the stack trace path exists but is not a directory
        OSError: the directory cannot be created
    """
    config = config or get_opslog_config()

    if config.stacktrace_path is None:
        logger.debug("stacktrace_processor_selected", variant="inline")
        return SimpleStackTraceProcessor()

    destination = config.stacktrace_path
    if destination.exists() and not destination.is_dir():
        raise ValueError(f"stack trace path must be a directory: {destination}")
    destination.mkdir(parents=True, exist_ok=True)

    calculator = fingerprint_calculator or ContentFingerprintCalculator(config.fingerprint_algorithm)
    logger.debug(
        "stacktrace_processor_selected",
        variant="filesystem",
        destination=str(destination),
        algorithm=getattr(calculator, "algorithm", type(calculator).__name__),
    )
    return FilesystemStackTraceProcessor(destination, calculator)
