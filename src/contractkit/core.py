"""Type values and the ``declare``/``define`` construction rule.

A type is a named predicate. ``declare`` turns any spec into a ``TypeValue``:

- a callable (predicate or another type) is used as the check directly,
  unless it exposes a callable ``check`` of its own, which is used instead;
- any other object with a ``name`` string and a callable ``check`` (an
  external option descriptor) contributes both;
- a class checks ``isinstance``;
- a mapping checks that every key is present in the candidate mapping and
  that its value satisfies the nested spec (extra keys are allowed);
- a list or tuple is a prefix constraint: the candidate list must be at least
  as long and each position must satisfy the nested spec;
- anything else is a literal compared with ``==``.

The helpers in this module do not depend on whether checking is enabled;
``contractkit.engine`` builds the enforcing layer on top of them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, Callable, Dict

from .exceptions import UNNAMED, ContractViolation, InvalidTypeError
from .predicates import field_of, is_list, is_mapping, is_print, is_typelike

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], bool]


class TypeValue:
    """Immutable, callable, named predicate with optional extra fields."""

    def __init__(self, check: Predicate, name: Any = UNNAMED, **fields: Any):
        object.__setattr__(self, "check", check)
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "_fields", dict(fields))

    def __getattr__(self, key: str) -> Any:
        if key == "_fields":
            raise AttributeError(key)
        try:
            return self._fields[key]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__} '{self}' has no field '{key}'"
            ) from None

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"TypeValue '{self}' is immutable")

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"TypeValue '{self}' is immutable")

    def __call__(self, value: Any) -> Any:
        return self.check(value)

    def __str__(self) -> str:
        return str(self.name)

    def __repr__(self) -> str:
        return f"TypeValue({str(self)!r})"

    @property
    def fields(self) -> Mapping:
        """Extra fields attached by the declarer (read-only view)."""
        return MappingProxyType(self._fields)


def declare(spec: Any, **fields: Any) -> TypeValue:
    """Turn arbitrary data into a type.

    Args:
        spec: Predicate, type, class, mapping, sequence or literal.
        **fields: Overlaid on the computed record. ``name`` and ``check``
            override the computed ones; anything else becomes an extra field.

    Returns:
        A new TypeValue, or ``spec`` itself when it already is one and no
        fields are given.
    """
    if isinstance(spec, TypeValue) and not fields:
        return spec
    record: Dict[str, Any] = {"check": _build_check(spec), "name": render_name(spec)}
    record.update(fields)
    return TypeValue(**record)


def define(spec: Any) -> TypeValue:
    """Coerce anything into a type; ``declare`` without extra fields."""
    return declare(spec)


def _build_check(spec: Any) -> Predicate:
    if isinstance(spec, type):
        return lambda e: isinstance(e, spec)

    if callable(spec):
        check = field_of(spec, "check")
        return check if callable(check) else spec

    if not is_mapping(spec) and is_typelike(spec):
        return field_of(spec, "check")

    if is_mapping(spec):
        nested = {key: define(sub) for key, sub in spec.items()}

        def check_fields(e: Any) -> bool:
            return is_mapping(e) and all(
                key in e and check_result(t, e[key]) for key, t in nested.items()
            )

        return check_fields

    if is_list(spec):
        positional = [define(sub) for sub in spec]

        def check_prefix(e: Any) -> bool:
            return (
                is_list(e)
                and len(e) >= len(positional)
                and all(check_result(t, x) for t, x in zip(positional, e))
            )

        return check_prefix

    return lambda e: _literal_equal(e, spec)


def check_result(t: Any, value: Any) -> bool:
    """Run a nested type on ``value``, insisting on a bool result."""
    result = t(value)
    if not isinstance(result, bool):
        raise InvalidTypeError(str(t), result)
    return result


def _literal_equal(e: Any, literal: Any) -> bool:
    if isinstance(e, bool) != isinstance(literal, bool):
        return False
    try:
        return bool(e == literal)
    except Exception:
        return False


def to_string(value: Any) -> str:
    """String conversion used for type names."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if is_list(value):
        return " ".join(to_string(v) for v in value)
    return str(value)


def render_name(spec: Any) -> str:
    """Display name of a spec, used for diagnostics."""
    if is_list(spec):
        return f"[ {' '.join(render_name(sub) for sub in spec)} ]"
    if isinstance(spec, type):
        return spec.__name__
    if not is_mapping(spec) and is_typelike(spec):
        return field_of(spec, "name")
    if is_print(spec):
        return to_string(spec)
    if is_mapping(spec):
        body = " ".join(f"{key} = {render_name(sub)};" for key, sub in spec.items())
        return f"{{ {body} }}"
    return UNNAMED


def try_eval(f: Callable[[Any], Any], value: Any) -> bool:
    """Report whether ``f(value)`` completes without raising.

    InvalidTypeError is a broken type definition and is re-raised.
    """
    try:
        f(value)
    except InvalidTypeError:
        raise
    except Exception as exc:
        logger.debug("try_eval: %s raised %s", getattr(f, "name", f), exc)
        return False
    return True


def default(fallback: Any, type_: Any, value: Any) -> Any:
    """Return ``value`` if it satisfies ``type_``, else ``fallback``.

    Always checks, whether or not contracts are enabled.
    """
    t = define(type_)
    try:
        result = t(value)
    except ContractViolation:
        return fallback
    if result is True:
        return value
    if result is False:
        return fallback
    raise InvalidTypeError(str(t), result)


def strict(value: Any) -> Any:
    """Force every lazy part of ``value`` (iterators, generators).

    Containers holding nothing lazy are returned as the same object.
    """
    return _force(value)


def _force(value: Any) -> Any:
    if isinstance(value, (str, bytes, bytearray)):
        return value
    if isinstance(value, Mapping):
        forced = {key: _force(item) for key, item in value.items()}
        if all(forced[key] is value[key] for key in forced):
            return value
        return forced
    if isinstance(value, list):
        forced_list = [_force(item) for item in value]
        if all(a is b for a, b in zip(forced_list, value)):
            return value
        return forced_list
    if isinstance(value, tuple):
        forced_list = [_force(item) for item in value]
        if all(a is b for a, b in zip(forced_list, value)):
            return value
        if hasattr(value, "_fields"):
            return type(value)(*forced_list)
        return tuple(forced_list)
    if isinstance(value, Iterator):
        return [_force(item) for item in value]
    return value
