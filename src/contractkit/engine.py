"""Contract engine.

``Contracts`` is the library object. It is built once from a
``ContractsConfig`` and its ``enable`` flag never changes afterwards. With
checking disabled, every contract returns its value untouched and never calls
a predicate.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Optional

from contractkit import core
from contractkit.exceptions import UNNAMED, ContractViolation, InvalidTypeError
from contractkit.schemas import ContractOptions, ContractsConfig, MessageBuilder
from contractkit.tracing import TraceBus

logger = logging.getLogger(__name__)


class Contract:
    """A type bound to diagnostic options, callable on a value.

    Calling it returns the value itself on success and raises
    ContractViolation on failure.
    """

    def __init__(self, engine: "Contracts", type_: Any, options: ContractOptions):
        self.engine = engine
        self.type = core.define(type_)
        self.options = options

    @property
    def name(self) -> str:
        return str(self.type)

    @property
    def check(self) -> core.Predicate:
        """The boolean predicate behind this contract, ignoring the enable flag."""
        return self.type.check

    def __call__(self, value: Any) -> Any:
        if not self.engine.enabled:
            return value
        result = self.type(value)
        if not isinstance(result, bool):
            raise InvalidTypeError(self.name, result)
        if result:
            return value
        self.engine.trace.trace_message(
            self.options.render(self.type), self.options.name, self.name
        )
        self.engine.trace.trace_value(value, self.options.name, self.name)
        raise ContractViolation(self.name, value, name=self.options.name)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Contract({self.name!r}, name={self.options.name!r})"


class Contracts:
    """Entry point of the library: contracts, named types and combinators."""

    def __init__(self, config: Optional[ContractsConfig] = None):
        from contractkit.prelude import Prelude
        from contractkit.yants import Yants

        self.config = config or ContractsConfig()
        self.trace = TraceBus(
            trace_file=self.config.trace_file,
            max_events=self.config.max_trace_events,
        )
        self.types = Prelude(self)
        self.yants = Yants(self)
        logger.debug("contracts initialised (enable=%s)", self.config.enable)

    @property
    def enabled(self) -> bool:
        return self.config.enable

    # Re-exported so a single engine object carries the whole interface.
    declare = staticmethod(core.declare)
    define = staticmethod(core.define)
    default = staticmethod(core.default)
    strict = staticmethod(core.strict)

    def contract(
        self,
        type_: Any,
        *,
        name: str = UNNAMED,
        message: Optional[MessageBuilder] = None,
    ) -> Contract:
        """Build a contract enforcing ``type_``.

        Args:
            type_: Anything ``define`` accepts.
            name: Diagnostic label of the contract.
            message: Builds the first trace line from a MessageContext.
        """
        return Contract(self, type_, ContractOptions(name=name, message=message))

    def is_(self, type_: Any) -> Contract:
        return self.contract(type_)

    def fn(self, arg_type: Any) -> Callable[[Callable[[Any], Any]], Callable[[Any], Any]]:
        """Guard the single argument of a function with ``is_(arg_type)``.

        Works as a decorator::

            @contracts.fn(types.Int)
            def double(x):
                return 2 * x
        """
        guard = self.is_(arg_type)

        def decorator(f: Callable[[Any], Any]) -> Callable[[Any], Any]:
            @functools.wraps(f)
            def wrapper(x: Any) -> Any:
                return f(guard(x))

            return wrapper

        return decorator
