"""Trace bus: the ordered side channel for contract failures."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Deque, Optional

from contractkit.schemas import TraceEvent, TraceKind
from contractkit.utils.logging_utils import format_trace_line, safe_append_log

logger = logging.getLogger("contractkit.trace")

DEFAULT_MAX_EVENTS = 1000


def _now_iso() -> str:
    """Generate ISO-8601 timestamp."""
    return datetime.now(timezone.utc).isoformat()


@dataclass
class TraceBus:
    """Ordered record of the most recent trace events.

    At most ``max_events`` events are kept (``None`` keeps all); older ones
    are dropped first. Every event is also logged on the ``contractkit.trace``
    logger and, when ``trace_file`` is set, appended to that file.
    """

    events: Deque[TraceEvent] = field(default_factory=deque)
    trace_file: Optional[Path] = field(default=None)
    max_events: Optional[int] = field(default=DEFAULT_MAX_EVENTS)

    def __post_init__(self):
        self.events = deque(self.events, maxlen=self.max_events)
        self._emitted = len(self.events)

    def emit(self, event: TraceEvent) -> None:
        self.events.append(event)
        self._emitted += 1
        line = format_trace_line(event)
        logger.warning(line)
        if self.trace_file is not None:
            ok, error = safe_append_log(self.trace_file, line)
            if not ok:
                logger.error(error)

    def trace_message(self, message: str, contract_name: str, type_name: str) -> None:
        self.emit(TraceEvent(
            event_id=f"message-{self._emitted}",
            kind=TraceKind.MESSAGE,
            payload=message,
            contract_name=contract_name,
            type_name=type_name,
            timestamp=_now_iso(),
        ))

    def trace_value(self, value: Any, contract_name: str, type_name: str) -> None:
        self.emit(TraceEvent(
            event_id=f"value-{self._emitted}",
            kind=TraceKind.VALUE,
            payload=value,
            contract_name=contract_name,
            type_name=type_name,
            timestamp=_now_iso(),
        ))

    def clear(self) -> None:
        self.events.clear()
