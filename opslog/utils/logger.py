"""
Structured Logging Configuration
================================
Structlog setup for JSON output, with stack traces routed through a
StackTraceProcessor instead of being inlined by format_exc_info.
"""

import io
import logging
import sys
import traceback
from typing import Callable, Optional, Union

import structlog
from structlog.types import EventDict, WrappedLogger

from ..core.config import OpsLogConfig, get_opslog_config
from ..core.types import FailureInfo
from ..processors.base import StackTraceProcessor


def print_to_stderr(exc: BaseException) -> None:
    """Default error handler: print the archive failure to standard error."""
    sys.stderr.write("".join(traceback.format_exception(exc)))


class StackTraceRenderer:
    """
    Structlog processor replacing `format_exc_info`.

    Pops `exc_info` from the event and stores the processor's text for the
    exception under `exception`: the full trace for the inline processor, a
    substitute message with a file URI for the archiving one.

    An `OSError` raised while archiving goes to `error_handler` and the event
    is emitted without an `exception` key, so logging never raises into the
    caller.
    """

    def __init__(
        self,
        processor: StackTraceProcessor,
        error_handler: Callable[[BaseException], None] = print_to_stderr,
    ):
        self.processor = processor
        self.error_handler = error_handler

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        exc_info = event_dict.pop("exc_info", None)
        exc = _exception_from(exc_info)
        if exc is None:
            return event_dict

        buffer = io.StringIO()
        try:
            self.processor.process(exc, buffer)
        except OSError as e:
            self.error_handler(e)
            return event_dict
        event_dict["exception"] = buffer.getvalue()
        return event_dict


class OpsBoundLogger(structlog.stdlib.BoundLogger):
    """`exception()` logs at error level; only StackTraceRenderer renders the trace."""

    def exception(self, event=None, *args, **kw):
        kw.setdefault("exc_info", True)
        return self.error(event, *args, **kw)


def _exception_from(exc_info) -> Optional[Union[FailureInfo, BaseException]]:
    if not exc_info:
        return None
    if isinstance(exc_info, (FailureInfo, BaseException)):
        return exc_info
    if isinstance(exc_info, tuple):
        return exc_info[1]
    return sys.exc_info()[1]


def configure_logging(
    config: Optional[OpsLogConfig] = None,
    processor: Optional[StackTraceProcessor] = None,
    error_handler: Callable[[BaseException], None] = print_to_stderr,
) -> StackTraceProcessor:
    """
    Configure structlog and stdlib logging to stdout.

    The stack trace processor defaults to the one selected by the
    configuration. Archive failures during logging go to `error_handler`.
    Returns the processor wired into the pipeline.
    """
    config = config or get_opslog_config()
    if processor is None:
        from ..bootstrap.factory import build_stack_trace_processor
        processor = build_stack_trace_processor(config)

    renderer = (
        structlog.processors.JSONRenderer()
        if config.json_logs
        else structlog.dev.ConsoleRenderer(exception_formatter=structlog.dev.plain_traceback)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            StackTraceRenderer(processor, error_handler),
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=OpsBoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, config.log_level),
    )
    return processor


def get_logger(name: str) -> OpsBoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
