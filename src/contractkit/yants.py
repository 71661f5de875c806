"""Compatibility layer for the yants validator-combinator API.

yants checkers are functions that return their argument on success and raise
on failure. ``unwrap`` turns such a checker back into a boolean type by
trying the call, so yants-style checkers and contractkit types mix freely.

Entries are exposed as attributes (``yants.int``, ``yants.either_n``) and,
under their original names, through ``yants["eitherN"]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, Sequence

from contractkit.core import TypeValue, declare, define, try_eval
from contractkit.engine import Contract

if TYPE_CHECKING:
    from contractkit.engine import Contracts

_MISSING = object()

YANTS_NAMES: Dict[str, str] = {
    "any": "any",
    "attrs": "attrs",
    "bool": "bool",
    "defun": "defun",
    "drv": "drv",
    "either": "either",
    "eitherN": "either_n",
    "enum": "enum",
    "float": "float",
    "function": "function",
    "int": "int",
    "list": "list",
    "null": "null",
    "option": "option",
    "path": "path",
    "restrict": "restrict",
    "string": "string",
    "struct": "struct",
    "sum": "sum",
    "type": "type",
    "unit": "unit",
}


class Yants:
    """yants entry points built on an engine's contracts and prelude."""

    def __init__(self, engine: "Contracts"):
        self._engine = engine
        types = engine.types
        is_ = engine.is_

        self.any = is_(types.Any)
        self.bool = is_(types.Bool)
        self.drv = is_(types.Drv)
        self.float = is_(types.Float)
        self.function = is_(types.enum([types.Lambda, types.Functor]))
        self.int = is_(types.Int)
        self.null = is_(types.Null)
        self.path = is_(types.Path)
        self.string = is_(types.Str)
        self.type = is_(types.Type)
        self.unit = is_(types.Unit)

        self.enum = self.opt(types.enum)
        self.struct = self.opt(define)
        self.sum = self.opt(types.both)

    def __getitem__(self, name: str) -> Any:
        return getattr(self, YANTS_NAMES[name])

    @staticmethod
    def unwrap(f: Callable[[Any], Any]) -> TypeValue:
        """Type that holds when calling ``f`` does not raise."""
        return declare(lambda x: try_eval(f, x), name=str(getattr(f, "name", "?")))

    def opt(self, builder: Callable[[Any], Any]) -> Callable[..., Any]:
        """Wrap a builder so it can be given an optional leading name.

        ``opt(b)("Name", spec)`` checks against ``b(spec)`` named ``Name``;
        ``opt(b)("Name")`` waits for the spec; ``opt(b)(spec)`` is unnamed.
        """
        is_ = self._engine.is_

        def build(name_or_spec: Any, spec: Any = _MISSING) -> Any:
            if isinstance(name_or_spec, str):
                if spec is _MISSING:
                    return lambda later: is_(declare(builder(later), name=name_or_spec))
                return is_(declare(builder(spec), name=name_or_spec))
            return is_(builder(name_or_spec))

        return build

    def attrs(self, t: Callable[[Any], Any]) -> Contract:
        return self._engine.is_(self._engine.types.set_of(self.unwrap(t)))

    def list(self, t: Callable[[Any], Any]) -> Contract:
        return self._engine.is_(self._engine.types.list_of(self.unwrap(t)))

    def either(self, t1: Callable[[Any], Any], t2: Callable[[Any], Any]) -> Contract:
        return self._engine.is_(self._engine.types.enum([self.unwrap(t1), self.unwrap(t2)]))

    def either_n(self, ts: Sequence[Callable[[Any], Any]]) -> Contract:
        return self._engine.is_(self._engine.types.enum([self.unwrap(t) for t in ts]))

    def option(self, t: Callable[[Any], Any]) -> Contract:
        return self._engine.is_(self._engine.types.maybe(self.unwrap(t)))

    def restrict(self, name: str, pred: Callable[[Any], bool], t: Callable[[Any], Any]) -> Contract:
        """Checks ``t`` first, then ``pred`` on the value ``t`` accepted."""
        base = self.unwrap(t)
        return self._engine.contract(
            declare(lambda x: base(x) and pred(x), name=f"restrict {name}"),
            name=name,
        )

    def defun(self, args: Sequence[Callable[[Any], Any]], f: Callable[[Any], Any]) -> Callable[[Any], Any]:
        """Curried function with checked arguments and result.

        ``args`` lists one checker per argument followed by the result's.
        """
        if len(args) < 2:
            raise ValueError("defun needs at least one argument type and a result type")
        head, rest = args[0], args[1:]

        def call(i: Any) -> Any:
            applied = f(head(i))
            if len(args) > 2:
                return self.defun(rest, applied)
            return rest[0](applied)

        return call
