"""Tests for the type builders and the named prelude types."""

import pytest

from contractkit import Contracts, ContractsConfig, ContractViolation, InvalidTypeError
from contractkit.predicates import is_int


@pytest.fixture
def contracts():
    return Contracts(ContractsConfig(enable=True))


@pytest.fixture
def t(contracts):
    return contracts.types


SAMPLES = [0, 5, -1, True, "", "x", "42", None, [], [1], {}, {"a": 1}, 1.5]


def test_list_of_and_set_of_accept_empty_containers(t) -> None:
    for member in (t.Int, t.Str, t.None_, {"a": t.Int}, [t.Int]):
        assert t.list_of(member)([])
        assert t.set_of(member)({})


def test_list_of_is_homogeneous(t) -> None:
    ints = t.list_of(t.Int)
    assert ints([1, 2, 3])
    assert not ints([5, "x"])
    assert not ints(5)
    assert ints.name == "listOf (Int)"


def test_set_of_checks_values_only(t) -> None:
    ints = t.set_of(t.Int)
    assert ints({"a": 1, "b": 2})
    assert not ints({"a": "x"})
    assert not ints([1, 2])
    assert ints.name == "setOf (Int)"


def test_length_is_a_minimum(t) -> None:
    two = t.length(2)
    assert two([1, 2])
    assert two([1, 2, 3])
    assert not two([1])
    assert not two("ab")
    assert two.name == "length 2"


def test_length_guards_its_argument(t) -> None:
    with pytest.raises(ContractViolation):
        t.length("2")


def test_enum_is_a_union(t) -> None:
    either = t.enum([t.Int, t.Str])
    assert either("x")
    assert either(5)
    assert not either(True)
    assert either.name == "enum [ Int Str ]"


def test_enum_short_circuits(t) -> None:
    calls = []

    def spy(value):
        calls.append(value)
        return False

    assert t.enum([t.Any, spy])(1)
    assert calls == []


def test_both_is_an_intersection(t) -> None:
    digits = t.both([t.Str, t.match("^[0-9]+$")])
    assert digits("42")
    assert not digits("4a")
    assert not digits(42)
    assert digits.name == "both [ Str match /^[0-9]+$/ regex ]"


def test_both_and_enum_require_a_list(t) -> None:
    with pytest.raises(ContractViolation):
        t.both(t.Int)
    with pytest.raises(ContractViolation):
        t.enum("Int")


@pytest.mark.parametrize("name", ["Int", "Str", "Null", "List", "Set", "Any", "None"])
def test_not_is_a_complement(t, name) -> None:
    base = t[name]
    negated = t.not_(base)
    for value in SAMPLES:
        assert negated(value) == (not base(value))
    assert negated.name == f"!({name})"


def test_match_is_anchored(t) -> None:
    abc = t.match("^abc$")
    assert abc("abc")
    assert not abc("xabc")
    assert not t.match("abc")("xabc")
    assert not t.match("abc")("abcx")
    assert not abc(None)


def test_match_requires_a_valid_pattern(t) -> None:
    with pytest.raises(ContractViolation):
        t.match(5)
    with pytest.raises(ContractViolation):
        t.match("(")


def test_option_bridges_external_descriptors(t) -> None:
    port = t.option({"name": "port", "check": is_int})
    assert port.name == "port"
    assert port(8080)
    assert not port("8080")

    again = t.option(t.Int)
    assert again.name == "Int"
    assert again(1)


def test_option_requires_a_type_descriptor(t) -> None:
    with pytest.raises(ContractViolation):
        t.option("port")


def test_maybe(t) -> None:
    maybe_int = t.maybe(t.Int)
    assert maybe_int(None)
    assert maybe_int(3)
    assert not maybe_int("x")
    assert maybe_int.name == "Maybe (Int)"


def test_combinators_accept_raw_specs(t) -> None:
    logins = t.list_of({"user": t.Str})
    assert logins([{"user": "a"}, {"user": "b", "id": 2}])
    assert not logins([{"user": "a"}, {}])


def test_builder_guards_are_skipped_when_disabled() -> None:
    t = Contracts(ContractsConfig(enable=False)).types
    # No argument check: the bad count only surfaces when the type is used.
    loose = t.length("2")
    assert loose.name == "length 2"
    assert loose([1, 2]) is False


def test_prelude_lookup(t) -> None:
    assert t["None"] is t.None_
    assert "Int" in t
    assert "Nope" not in t
    assert t.Int.name == "Int"
    assert t.None_.name == "None"
    assert {"Url", "Drv", "Unit", "SemVer"} <= set(t)


def test_prelude_composite_types(t) -> None:
    assert t.Url("https://example.com/a?b=1#c")
    assert not t.Url(5)
    assert t.Drv({"type": "derivation", "name": "hello"})
    assert not t.Drv({"type": "other"})
    assert t.Drv.name == "Derivation"
    assert t.Unit({})
    assert t.Unit({"a": 1})
    assert not t.Unit([])
    assert t.Type(t.Int)
    assert not t.Type(is_int)
    assert t.Format("x")
    assert t.Print([1, "x"])


def test_todo_type_raises(t) -> None:
    with pytest.raises(NotImplementedError):
        t.TODO(1)


def test_default_with_a_loose_length_falls_back() -> None:
    contracts = Contracts(ContractsConfig(enable=False))
    assert contracts.default("fb", contracts.types.length("2"), [1]) == "fb"


@pytest.mark.parametrize(
    "build",
    [
        lambda t, bad: t.list_of(bad),
        lambda t, bad: t.set_of(bad),
        lambda t, bad: t.both([t.Any, bad]),
        lambda t, bad: t.enum([t.None_, bad]),
        lambda t, bad: t.not_(bad),
        lambda t, bad: t.maybe(bad),
    ],
)
def test_nested_non_boolean_results_are_invalid(contracts, t, build) -> None:
    composite = build(t, lambda x: x)
    value = {"a": 1} if composite.name.startswith("setOf") else [1]
    with pytest.raises(InvalidTypeError):
        contracts.is_(composite)(value)
