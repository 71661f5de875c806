"""Configuration loader for contractkit.

The configuration is read once, when the library object is built. A file may
be YAML or JSON and may either hold the fields at top level or under a
``contracts:`` key. The ``CONTRACTS_ENABLE`` environment variable overrides
``enable``.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import ValidationError

from contractkit.engine import Contracts
from contractkit.exceptions import ConfigLoadError
from contractkit.schemas import ContractsConfig

ENABLE_ENV_VAR = "CONTRACTS_ENABLE"
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _load_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigLoadError(path.name, "file not found")

    text = path.read_text()
    try:
        if path.suffix.lower() in {".yaml", ".yml"}:
            payload = yaml.safe_load(text)
        else:
            payload = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigLoadError(path.name, f"Failed to parse: {exc}")

    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigLoadError(path.name, "Root must be a mapping")
    if "contracts" in payload:
        section = payload["contracts"] or {}
        if not isinstance(section, dict):
            raise ConfigLoadError(path.name, "'contracts' must be a mapping")
        return dict(section)
    return payload


def _env_flag(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigLoadError(ENABLE_ENV_VAR, f"Expected a boolean, got '{raw}'")


def load_config(
    path: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> ContractsConfig:
    """Build a ContractsConfig from an optional file and the environment.

    Args:
        path: YAML or JSON configuration file; defaults apply without one.
        env: Environment mapping (defaults to ``os.environ``).

    Returns:
        The frozen configuration.

    Raises:
        ConfigLoadError: If the file is missing, unparsable or invalid.
    """
    env = os.environ if env is None else env
    data: Dict[str, Any] = {}
    file_name = "<defaults>"
    if path is not None:
        path = Path(path)
        file_name = path.name
        data = _load_file(path)

    if ENABLE_ENV_VAR in env:
        data["enable"] = _env_flag(env[ENABLE_ENV_VAR])

    try:
        return ContractsConfig(**data)
    except ValidationError as exc:
        raise ConfigLoadError(file_name, str(exc))


def load_contracts(
    path: Optional[Path] = None,
    *,
    enable: Optional[bool] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Contracts:
    """Build the library object.

    An explicit ``enable`` wins over the file and the environment.
    """
    config = load_config(path, env=env)
    if enable is not None:
        config = config.model_copy(update={"enable": enable})
    return Contracts(config)
