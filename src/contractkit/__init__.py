"""contractkit package root.

The public API surface is the ``Contracts`` engine (built with
``load_contracts``), the engine-independent helpers from ``contractkit.core``
and the exception types. Example::

    from contractkit import load_contracts

    contracts = load_contracts(enable=True)
    t = contracts.types
    login = contracts.is_({"user": t.Str, "password": t.Str})
    login({"user": "a", "password": "b"})
"""

__version__ = "0.1.0"

from contractkit.config_loader import load_config, load_contracts  # noqa: F401
from contractkit.core import (  # noqa: F401
    TypeValue,
    declare,
    default,
    define,
    render_name,
    strict,
    try_eval,
)
from contractkit.engine import Contract, Contracts  # noqa: F401
from contractkit.exceptions import (  # noqa: F401
    UNNAMED,
    ConfigLoadError,
    ContractsError,
    ContractViolation,
    InvalidTypeError,
)
from contractkit.schemas import ContractsConfig, MessageContext  # noqa: F401

__all__ = [
    "__version__",
    "load_config",
    "load_contracts",
    "TypeValue",
    "declare",
    "default",
    "define",
    "render_name",
    "strict",
    "try_eval",
    "Contract",
    "Contracts",
    "UNNAMED",
    "ConfigLoadError",
    "ContractsError",
    "ContractViolation",
    "InvalidTypeError",
    "ContractsConfig",
    "MessageContext",
]
