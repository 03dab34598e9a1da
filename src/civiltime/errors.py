"""Error taxonomy for civil value conversions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class CivilTimeError(ValueError):
    """Base class for failures converting a civil value to or from text."""


@dataclass(frozen=True, slots=True)
class FieldViolation:
    """A single field whose value lies outside its permitted bounds."""

    field: str
    value: int
    lower: int
    upper: int

    def __str__(self) -> str:
        return f"{self.field} '{self.value}' outside of range [{self.lower},{self.upper}]"


class RangeError(CivilTimeError):
    """Raised when a value cannot be encoded because a field is out of bounds."""

    def __init__(self, operation: str, violations: Sequence[FieldViolation]) -> None:
        self.operation = operation
        self.violations = tuple(violations)
        details = "; ".join(str(violation) for violation in self.violations)
        super().__init__(f"{operation}: {details}")


class ParseError(CivilTimeError):
    """Raised when text does not match the canonical layout of the target type."""

    def __init__(self, kind: str, text: str, detail: str) -> None:
        self.kind = kind
        self.text = text
        self.detail = detail
        super().__init__(f"invalid {kind}: {detail}")


__all__ = ["CivilTimeError", "FieldViolation", "ParseError", "RangeError"]
