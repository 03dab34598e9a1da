"""Codec configuration values."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from civiltime.domain.validation import ValidationMode

from .env import env_choice, env_flag

log = logging.getLogger(__name__)

VALIDATION_ENV_VAR: Final[str] = "CIVILTIME_VALIDATION"
STRICT_SCAN_ENV_VAR: Final[str] = "CIVILTIME_STRICT_SCAN"


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """How civil values are checked on the way out and on the way back in.

    ``strict_scan`` decides whether a column value that fails to decode raises or
    is loaded as ``None``.
    """

    validation: ValidationMode = ValidationMode.FULL
    strict_scan: bool = True


def get_codec_config() -> CodecConfig:
    validation = env_choice(
        VALIDATION_ENV_VAR,
        tuple(mode.value for mode in ValidationMode),
        ValidationMode.FULL.value,
    )
    config = CodecConfig(
        validation=ValidationMode(validation),
        strict_scan=env_flag(STRICT_SCAN_ENV_VAR, default=True),
    )
    log.debug("Resolved codec configuration: %s", config)
    return config
