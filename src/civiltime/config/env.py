"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import Final

from .errors import InvalidConfigurationError

_TRUTHY: Final[tuple[str, ...]] = ("1", "true", "yes", "on")
_FALSY: Final[tuple[str, ...]] = ("0", "false", "no", "off")


def optional_env_var(name: str) -> str | None:
    """Return the stripped value of ``name``, or ``None`` if it is unset or blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    """Return ``name`` lower-cased if it is one of ``choices``, else raise."""

    value = optional_env_var(name)
    if value is None:
        return default
    normalized = value.lower()
    if normalized not in choices:
        raise InvalidConfigurationError(name, value, choices)
    return normalized


def env_flag(name: str, *, default: bool) -> bool:
    value = optional_env_var(name)
    if value is None:
        return default
    normalized = value.lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise InvalidConfigurationError(name, value, _TRUTHY + _FALSY)
