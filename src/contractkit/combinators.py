"""Type builders.

Builders take one or more values and return a new named type. Type arguments
always go through ``define`` first, so raw predicates, mappings and sequences
work wherever a type is expected. Builder arguments of a fixed shape (a count,
a list of types, a pattern) are themselves checked with the engine's ``fn``.

Checks built here stay total: a candidate of the wrong shape is ``False``.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Iterable

from contractkit.core import TypeValue, check_result, declare, define
from contractkit.predicates import (
    field_of,
    is_int,
    is_list,
    is_mapping,
    is_nothing,
    is_null,
    is_regex,
    is_typelike,
)

if TYPE_CHECKING:
    from contractkit.engine import Contracts


class Combinators:
    """Builders bound to an engine; argument guards follow its enable flag."""

    def __init__(self, engine: "Contracts"):
        self._engine = engine
        fn = engine.fn
        self.length = fn(declare(is_int, name="Int"))(self._length)
        self.option = fn(declare(is_typelike, name="Type"))(self._option)
        self.both = fn(declare(is_list, name="List"))(self._both)
        self.enum = fn(declare(is_list, name="List"))(self._enum)
        self.match = fn(declare(is_regex, name="Regex"))(self._match)

    @staticmethod
    def _length(n: int) -> TypeValue:
        return declare(
            lambda xs: is_list(xs) and is_int(n) and len(xs) >= n,
            name=f"length {n}",
        )

    def list_of(self, type_: Any) -> TypeValue:
        """Every element of a list satisfies ``type_``."""
        t = define(type_)
        return declare(
            lambda xs: is_list(xs) and all(check_result(t, x) for x in xs),
            name=f"listOf ({t})",
        )

    def set_of(self, type_: Any) -> TypeValue:
        """Every value of a mapping satisfies ``type_``; keys are free."""
        t = define(type_)
        values_of = self.list_of(t)
        return declare(
            lambda s: is_mapping(s) and values_of(list(s.values())),
            name=f"setOf ({t})",
        )

    @staticmethod
    def _option(descriptor: Any) -> TypeValue:
        return declare(
            is_nothing,
            name=field_of(descriptor, "name"),
            check=field_of(descriptor, "check"),
        )

    @staticmethod
    def _both(types_: Iterable[Any]) -> TypeValue:
        members = [define(t) for t in types_]
        return declare(
            lambda e: all(check_result(t, e) for t in members),
            name=f"both [ {' '.join(str(t) for t in members)} ]",
        )

    @staticmethod
    def _enum(types_: Iterable[Any]) -> TypeValue:
        members = [define(t) for t in types_]
        return declare(
            lambda e: any(check_result(t, e) for t in members),
            name=f"enum [ {' '.join(str(t) for t in members)} ]",
        )

    def not_(self, type_: Any) -> TypeValue:
        t = define(type_)
        return declare(lambda e: not check_result(t, e), name=f"!({t})")

    @staticmethod
    def _match(regex: str) -> TypeValue:
        pattern = re.compile(regex)
        return declare(
            lambda s: isinstance(s, str) and pattern.fullmatch(s) is not None,
            name=f"match /{regex}/ regex",
        )

    def maybe(self, type_: Any) -> TypeValue:
        """``None`` or a value of ``type_``."""
        t = define(type_)
        return declare(lambda e: is_null(e) or check_result(t, e), name=f"Maybe ({t})")
