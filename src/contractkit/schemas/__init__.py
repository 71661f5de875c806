"""Schema exports."""

from .base import SchemaBase
from .config import ContractsConfig
from .options import ContractOptions, MessageBuilder, MessageContext, named_message, type_message
from .trace import TraceEvent, TraceKind

__all__ = [
    "SchemaBase",
    "ContractsConfig",
    "ContractOptions",
    "MessageBuilder",
    "MessageContext",
    "named_message",
    "type_message",
    "TraceEvent",
    "TraceKind",
]
