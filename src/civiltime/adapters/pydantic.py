"""Pydantic field annotations for civil values in JSON documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated, Any

from pydantic_core import core_schema

from civiltime.config import get_codec_config
from civiltime.domain import Date, DateTime, TimeOfDay, ValidationMode

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue

    from civiltime.domain import CivilValue


@dataclass(frozen=True, slots=True)
class CivilTextSchema:
    """Validate a civil value from canonical text and serialise it back to text.

    Python-mode validation also accepts an instance of the target type unchanged.
    JSON output honours ``mode``; left unset, it follows ``CIVILTIME_VALIDATION``.
    """

    civil_type: type[Date] | type[TimeOfDay] | type[DateTime]
    json_format: str
    mode: ValidationMode | None = None

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        _ = source_type, handler
        from_text = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(self.civil_type.parse),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_text,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(self.civil_type), from_text]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                self._serialize, when_used="json"
            ),
        )

    def __get_pydantic_json_schema__(
        self, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        _ = schema
        json_schema = handler(core_schema.str_schema())
        json_schema["format"] = self.json_format
        return json_schema

    def _serialize(self, value: CivilValue) -> str:
        return value.value(mode=self.mode or get_codec_config().validation)


DateField = Annotated[Date, CivilTextSchema(Date, "date")]
TimeOfDayField = Annotated[TimeOfDay, CivilTextSchema(TimeOfDay, "time")]
DateTimeField = Annotated[DateTime, CivilTextSchema(DateTime, "civil-date-time")]

__all__ = ["CivilTextSchema", "DateField", "DateTimeField", "TimeOfDayField"]
