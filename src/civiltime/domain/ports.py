"""Capability set shared by the civil value types."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from civiltime.domain.validation import ValidationMode


@runtime_checkable
class CivilValue(Protocol):
    """Text-encodable civil value usable at the JSON and persistence boundaries."""

    def to_json(self, *, mode: ValidationMode = ...) -> bytes: ...

    @classmethod
    def from_json(cls, data: bytes | bytearray | str) -> Self: ...

    def value(self, *, mode: ValidationMode = ...) -> str: ...

    @classmethod
    def scan(cls, value: object) -> Self: ...

    @classmethod
    def parse(cls, text: str) -> Self: ...


__all__ = ["CivilValue"]
