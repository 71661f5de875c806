"""Logging utilities for contractkit.

Provides the safe append helper used by the trace file sink and the line
format shared by the logger and the file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

from ..schemas import TraceEvent, TraceKind


def format_trace_line(event: TraceEvent) -> str:
    """Render one trace event as a single ``trace: ...`` line.

    Offending values are always shown with ``repr`` so a string value cannot
    be mistaken for a message.
    """
    payload = event.payload
    if event.kind is TraceKind.VALUE or not isinstance(payload, str):
        text = repr(payload)
    else:
        text = payload
    return f"trace: {text}"


def safe_append_log(
    path: Path,
    content: str,
    encoding: str = "utf-8",
    ensure_trailing_newline: bool = True,
) -> Tuple[bool, Optional[str]]:
    """Append content to a log file with directory creation and error handling.

    Args:
        path: Path to the log file.
        content: Content to append to the log.
        encoding: Text encoding for the file (default: "utf-8").
        ensure_trailing_newline: If True, add newline if content doesn't end with one.

    Returns:
        Tuple of (success: bool, error_message: Optional[str]).
        If success is True, error_message is None.
        If success is False, error_message contains the error details.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding=encoding) as handle:
            handle.write(content)
            if ensure_trailing_newline and not content.endswith("\n"):
                handle.write("\n")
        return (True, None)
    except OSError as exc:
        return (False, f"Failed to append to log {path}: {exc}")


__all__ = ["format_trace_line", "safe_append_log"]
