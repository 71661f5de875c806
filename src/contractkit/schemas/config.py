"""Library configuration schema."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import ConfigDict, Field

from .base import SchemaBase


class ContractsConfig(SchemaBase):
    """Load-time configuration; immutable once built.

    Attributes:
        enable: When False every contract is the identity function and no
            predicate is ever invoked.
        trace_file: Optional file that failure traces are appended to, in
            addition to the ``contractkit.trace`` logger.
        max_trace_events: How many trace events the engine keeps in memory;
            ``None`` keeps every event.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    enable: bool = Field(default=False)
    trace_file: Optional[Path] = Field(default=None)
    max_trace_events: Optional[int] = Field(default=1000, ge=1)
