"""Civil value types and their text codec."""

from __future__ import annotations

from civiltime.domain.date import Date
from civiltime.domain.date_time import DateTime
from civiltime.domain.ports import CivilValue
from civiltime.domain.time_of_day import TimeOfDay
from civiltime.domain.validation import ValidationMode

__all__ = ["CivilValue", "Date", "DateTime", "TimeOfDay", "ValidationMode"]
