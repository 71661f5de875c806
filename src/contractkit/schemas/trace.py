"""Trace event schemas."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import Field

from .base import SchemaBase


class TraceKind(str, Enum):
    MESSAGE = "message"
    VALUE = "value"


class TraceEvent(SchemaBase):
    event_id: str
    kind: TraceKind
    payload: Any
    contract_name: Optional[str] = Field(default=None)
    type_name: Optional[str] = Field(default=None)
    timestamp: Optional[str] = Field(default=None)
