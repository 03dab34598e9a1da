"""Application configuration helpers."""

from __future__ import annotations

from .codec import STRICT_SCAN_ENV_VAR, VALIDATION_ENV_VAR, CodecConfig, get_codec_config
from .env import env_choice, env_flag, optional_env_var
from .errors import ConfigurationError, InvalidConfigurationError

__all__ = [
    "STRICT_SCAN_ENV_VAR",
    "VALIDATION_ENV_VAR",
    "CodecConfig",
    "ConfigurationError",
    "InvalidConfigurationError",
    "env_choice",
    "env_flag",
    "get_codec_config",
    "optional_env_var",
]
