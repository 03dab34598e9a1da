"""SQLAlchemy column types storing civil values as canonical text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from sqlalchemy import Dialect, String, TypeDecorator

from civiltime.config import get_codec_config
from civiltime.domain import Date, DateTime, TimeOfDay, ValidationMode
from civiltime.errors import ParseError

if TYPE_CHECKING:
    from civiltime.config import CodecConfig

log = logging.getLogger(__name__)

T = TypeVar("T", Date, TimeOfDay, DateTime)


class _CivilTextType(TypeDecorator[T], Generic[T]):
    impl = String
    cache_ok = True

    civil_type: ClassVar[type]
    length: ClassVar[int]

    def __init__(
        self,
        *,
        strict_scan: bool | None = None,
        validation: ValidationMode | None = None,
        config: CodecConfig | None = None,
    ) -> None:
        super().__init__(length=self.length)
        if strict_scan is None or validation is None:
            config = config or get_codec_config()
            strict_scan = config.strict_scan if strict_scan is None else strict_scan
            validation = config.validation if validation is None else validation
        self.strict_scan = strict_scan
        self.validation = validation

    def process_bind_param(self, value: T | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        if not isinstance(value, self.civil_type):
            raise TypeError(
                f"{type(self).__name__} expects {self.civil_type.__name__}, "
                f"got {type(value).__name__}"
            )
        return value.value(mode=self.validation)

    def process_result_value(self, value: object | None, dialect: Dialect) -> T | None:
        _ = dialect
        if value is None:
            return None
        try:
            return self.civil_type.scan(value)
        except ParseError as exc:
            if self.strict_scan:
                raise
            log.warning("Discarding undecodable %s column value: %s", exc.kind, exc)
            return None


class CivilDateType(_CivilTextType[Date]):
    civil_type = Date
    length = 10


class CivilTimeType(_CivilTextType[TimeOfDay]):
    civil_type = TimeOfDay
    length = 18


class CivilDateTimeType(_CivilTextType[DateTime]):
    civil_type = DateTime
    length = 29


__all__ = ["CivilDateTimeType", "CivilDateType", "CivilTimeType"]
