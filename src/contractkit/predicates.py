"""Primitive predicates.

Every function here takes one value and returns a bool. They never raise and
never look deeper than the outermost layer of the value (``is_list`` does not
inspect the elements). ``todo`` is the one exception: it always raises and
marks a type that is intentionally left unimplemented.
"""

from __future__ import annotations

import base64
import binascii
import json
import os
import re
import types
from collections.abc import Mapping
from pathlib import PurePath
from typing import Any

_LAMBDA_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
)

SEMVER_PATTERN = re.compile(
    r"(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)

SRI_DIGEST_SIZES = {"sha256": 32, "sha384": 48, "sha512": 64}
SRI_PATTERN = re.compile(r"(sha256|sha384|sha512)-([A-Za-z0-9+/]+={0,2})")


def is_any(e: Any) -> bool:
    return True


def is_nothing(e: Any) -> bool:
    return False


def is_mapping(e: Any) -> bool:
    return isinstance(e, Mapping)


def is_bool(e: Any) -> bool:
    return isinstance(e, bool)


def is_float(e: Any) -> bool:
    return isinstance(e, float)


def is_lambda(e: Any) -> bool:
    return isinstance(e, _LAMBDA_TYPES)


def is_int(e: Any) -> bool:
    # bool is a subclass of int but is its own kind of value here
    return isinstance(e, int) and not isinstance(e, bool)


def is_list(e: Any) -> bool:
    return isinstance(e, (list, tuple))


def is_path(e: Any) -> bool:
    return isinstance(e, PurePath)


def is_str(e: Any) -> bool:
    return isinstance(e, str)


def is_null(e: Any) -> bool:
    return e is None


def is_functor(e: Any) -> bool:
    """Callable instances that are not plain functions or classes."""
    return callable(e) and not is_lambda(e) and not isinstance(e, type)


def todo(e: Any) -> bool:
    raise NotImplementedError("Not implemented yet ...")


def field_of(e: Any, key: str, default: Any = None) -> Any:
    """Read ``key`` from a mapping or an attribute of an object."""
    if isinstance(e, Mapping):
        return e.get(key, default)
    try:
        return getattr(e, key, default)
    except Exception:
        return default


def is_typelike(e: Any) -> bool:
    """Anything presenting a ``name`` string and a callable ``check``."""
    return isinstance(field_of(e, "name"), str) and callable(field_of(e, "check"))


def is_format(e: Any) -> bool:
    """Values that turn into a meaningful string with ``str()``."""
    if isinstance(e, (str, PurePath, os.PathLike)):
        return True
    if isinstance(e, type) or isinstance(e, Mapping):
        return False
    return type(e).__str__ is not object.__str__


def is_print(e: Any) -> bool:
    return (
        is_bool(e)
        or is_float(e)
        or is_format(e)
        or is_int(e)
        or is_list(e)
        or is_null(e)
    )


def is_non_empty_str(e: Any) -> bool:
    return isinstance(e, str) and e != ""


def is_regex(e: Any) -> bool:
    if not isinstance(e, str):
        return False
    try:
        re.compile(e)
    except re.error:
        return False
    return True


def is_json(e: Any) -> bool:
    if not isinstance(e, str):
        return False
    try:
        json.loads(e)
    except ValueError:
        return False
    return True


def is_semver(e: Any) -> bool:
    return isinstance(e, str) and SEMVER_PATTERN.fullmatch(e) is not None


def is_hash(e: Any) -> bool:
    """SRI hashes such as ``sha256-<base64 digest>``."""
    if not isinstance(e, str):
        return False
    found = SRI_PATTERN.fullmatch(e)
    if found is None:
        return False
    algorithm, digest = found.groups()
    try:
        raw = base64.b64decode(digest, validate=True)
    except (binascii.Error, ValueError):
        return False
    return len(raw) == SRI_DIGEST_SIZES[algorithm]
