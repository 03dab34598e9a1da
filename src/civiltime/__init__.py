"""Time-zone independent civil date and time values."""

from __future__ import annotations

from importlib import metadata

from civiltime.domain import CivilValue, Date, DateTime, TimeOfDay, ValidationMode
from civiltime.errors import CivilTimeError, FieldViolation, ParseError, RangeError

try:
    __version__ = metadata.version("civiltime")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "CivilTimeError",
    "CivilValue",
    "Date",
    "DateTime",
    "FieldViolation",
    "ParseError",
    "RangeError",
    "TimeOfDay",
    "ValidationMode",
]
