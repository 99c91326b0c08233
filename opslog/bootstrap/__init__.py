"""OpsLog Bootstrap - Processor selection from configuration."""

from .factory import build_stack_trace_processor

__all__ = ["build_stack_trace_processor"]
