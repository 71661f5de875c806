"""Tests for configuration loading."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from contractkit import ConfigLoadError, ContractsConfig, load_config, load_contracts


def test_defaults_without_file() -> None:
    config = load_config(env={})
    assert config.enable is False
    assert config.trace_file is None


def test_yaml_file(tmp_path: Path) -> None:
    path = tmp_path / "contracts.yaml"
    path.write_text("enable: true\ntrace_file: logs/trace.log\n")

    config = load_config(path, env={})

    assert config.enable is True
    assert config.trace_file == Path("logs/trace.log")


def test_yaml_file_with_section(tmp_path: Path) -> None:
    path = tmp_path / "settings.yml"
    path.write_text("contracts:\n  enable: true\nother: 1\n")

    assert load_config(path, env={}).enable is True


def test_json_file(tmp_path: Path) -> None:
    path = tmp_path / "contracts.json"
    path.write_text(json.dumps({"enable": True}))

    assert load_config(path, env={}).enable is True


def test_empty_yaml_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "contracts.yaml"
    path.write_text("")

    assert load_config(path, env={}).enable is False


@pytest.mark.parametrize("raw, expected", [("1", True), ("TRUE", True), ("on", True), ("0", False), ("no", False)])
def test_env_overrides_file(tmp_path: Path, raw, expected) -> None:
    path = tmp_path / "contracts.yaml"
    path.write_text("enable: false\n" if expected else "enable: true\n")

    assert load_config(path, env={"CONTRACTS_ENABLE": raw}).enable is expected


def test_invalid_env_value() -> None:
    with pytest.raises(ConfigLoadError) as exc:
        load_config(env={"CONTRACTS_ENABLE": "maybe"})
    assert "CONTRACTS_ENABLE" in str(exc.value)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigLoadError) as exc:
        load_config(tmp_path / "absent.yaml", env={})
    assert exc.value.file_name == "absent.yaml"


def test_unparsable_file(tmp_path: Path) -> None:
    path = tmp_path / "contracts.yaml"
    path.write_text("enable: [unclosed\n")

    with pytest.raises(ConfigLoadError):
        load_config(path, env={})


def test_non_mapping_root(tmp_path: Path) -> None:
    path = tmp_path / "contracts.yaml"
    path.write_text("- enable\n")

    with pytest.raises(ConfigLoadError):
        load_config(path, env={})


def test_unknown_field(tmp_path: Path) -> None:
    path = tmp_path / "contracts.yaml"
    path.write_text("enable: true\nverbose: true\n")

    with pytest.raises(ConfigLoadError):
        load_config(path, env={})


def test_config_is_frozen() -> None:
    config = ContractsConfig(enable=True)
    with pytest.raises(ValidationError):
        config.enable = False


def test_load_contracts_explicit_flag_wins(tmp_path: Path) -> None:
    path = tmp_path / "contracts.yaml"
    path.write_text("enable: false\n")

    contracts = load_contracts(path, enable=True, env={"CONTRACTS_ENABLE": "0"})

    assert contracts.enabled is True
    assert contracts.config.enable is True


def test_load_contracts_from_env() -> None:
    assert load_contracts(env={"CONTRACTS_ENABLE": "yes"}).enabled is True
    assert load_contracts(env={}).enabled is False


def test_trace_history_size(tmp_path: Path) -> None:
    path = tmp_path / "contracts.yaml"
    path.write_text("enable: true\nmax_trace_events: 5\n")

    contracts = load_contracts(path, env={})

    assert contracts.config.max_trace_events == 5
    assert contracts.trace.events.maxlen == 5


def test_trace_history_size_must_be_positive(tmp_path: Path) -> None:
    path = tmp_path / "contracts.yaml"
    path.write_text("max_trace_events: 0\n")

    with pytest.raises(ConfigLoadError):
        load_config(path, env={})
