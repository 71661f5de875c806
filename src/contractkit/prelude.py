"""Named types available on every engine as ``contracts.types``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterator

from contractkit import predicates as p
from contractkit.combinators import Combinators
from contractkit.core import TypeValue, declare

if TYPE_CHECKING:
    from contractkit.engine import Contracts

# From https://www.rfc-editor.org/rfc/rfc3986#page-50
URL_PATTERN = r"^(([^:/?#]+):)?(//([^/?#]*))?([^?#]*)(\?([^#]*))?(#(.*))?"

PRIMITIVES = {
    "Any": p.is_any,
    "None": p.is_nothing,
    "Set": p.is_mapping,
    "Bool": p.is_bool,
    "Float": p.is_float,
    "Lambda": p.is_lambda,
    "Int": p.is_int,
    "List": p.is_list,
    "Path": p.is_path,
    "Str": p.is_str,
    "Null": p.is_null,
    "Functor": p.is_functor,
    "TODO": p.todo,
    "Type": p.is_typelike,
    "Format": p.is_format,
    "Print": p.is_print,
    "NonEmptyStr": p.is_non_empty_str,
    "Regex": p.is_regex,
    "Json": p.is_json,
    "SemVer": p.is_semver,
    "Hash": p.is_hash,
}


class Prelude(Combinators):
    """Primitive types named after themselves, plus the type builders.

    ``None`` is a keyword, so the bottom type is the ``None_`` attribute;
    ``prelude["None"]`` also works.
    """

    def __init__(self, engine: "Contracts"):
        super().__init__(engine)
        self._named: Dict[str, TypeValue] = {
            name: declare(check, name=name) for name, check in PRIMITIVES.items()
        }
        self._named["Url"] = declare(self.match(URL_PATTERN), name="Url")
        self._named["Drv"] = declare({"type": "derivation"}, name="Derivation")
        self._named["Unit"] = declare({}, name="{}")
        for name, t in self._named.items():
            setattr(self, "None_" if name == "None" else name, t)

    def __getitem__(self, name: str) -> TypeValue:
        return self._named[name]

    def __contains__(self, name: Any) -> bool:
        return name in self._named

    def __iter__(self) -> Iterator[str]:
        return iter(self._named)
