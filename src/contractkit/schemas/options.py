"""Contract options and the context handed to message builders."""

from __future__ import annotations

from typing import Any, Callable, Optional

from pydantic import ConfigDict, Field

from ..exceptions import UNNAMED
from .base import SchemaBase


class MessageContext(SchemaBase):
    """What a ``message`` callable receives: the contract name and its type."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: Any


MessageBuilder = Callable[[MessageContext], str]


def type_message(context: MessageContext) -> str:
    return f"Value should be of type '{context.type}':"


def named_message(context: MessageContext) -> str:
    return f"The following value doesn't respect the '{context.name}' contract:"


class ContractOptions(SchemaBase):
    """Diagnostic options of a contract.

    Without an explicit ``message`` every contract reports the expected type
    (``type_message``). Pass ``message=named_message`` to report the
    contract name instead.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default=UNNAMED)
    message: Optional[MessageBuilder] = Field(default=None)

    def render(self, type_: Any) -> str:
        builder = self.message or type_message
        return builder(MessageContext(name=self.name, type=type_))
