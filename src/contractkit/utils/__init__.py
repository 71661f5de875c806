"""Utility modules for contractkit."""

from .logging_utils import format_trace_line, safe_append_log

__all__ = [
    "format_trace_line",
    "safe_append_log",
]
