"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""


class InvalidConfigurationError(ConfigurationError):
    """Raised when an environment variable holds a value outside its accepted set."""

    def __init__(self, name: str, value: str, accepted: tuple[str, ...]) -> None:
        self.name = name
        self.value = value
        self.accepted = accepted
        options = ", ".join(accepted)
        super().__init__(f"Invalid value {value!r} for {name}; expected one of: {options}")
