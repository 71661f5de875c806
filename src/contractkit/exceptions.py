"""
Custom exception classes for contractkit.

Two failure kinds come out of a contract check: a recoverable
ContractViolation (the data is wrong) and an InvalidTypeError (the type
itself is wrong). Configuration problems raise ConfigLoadError.
"""

from typing import Any

UNNAMED = "<UNNAMED>"


class ContractsError(Exception):
    """Base exception for all contractkit errors."""
    pass


class ContractViolation(ContractsError):
    """A value did not satisfy a type's `check`."""

    def __init__(self, type_name: str, value: Any, name: str = UNNAMED):
        self.type_name = type_name
        self.value = value
        self.name = name
        super().__init__(
            f"TypeError: `check` function of the type '{type_name}' returned False"
        )


class InvalidTypeError(ContractsError):
    """A type's `check` returned something other than a bool.

    This is a bug in the type definition, not in the data being checked,
    so helpers that recover from ContractViolation never swallow it.
    """

    def __init__(self, type_name: str, result: Any):
        self.type_name = type_name
        self.result = result
        super().__init__(
            f"InvalidType: '{type_name}' is not a function that returns a bool "
            f"(got {type(result).__name__}). "
            "Did you forget to call a type constructor?"
        )


class ConfigLoadError(ContractsError):
    """Error loading a contractkit configuration file."""

    def __init__(self, file_name: str, message: str):
        self.file_name = file_name
        self.message = message
        super().__init__(f"Error loading {file_name}: {message}")
