"""``json`` module integration for documents carrying civil values."""

from __future__ import annotations

import json
from typing import Any

from civiltime.config import get_codec_config
from civiltime.domain import Date, DateTime, TimeOfDay, ValidationMode


class CivilJSONEncoder(json.JSONEncoder):
    """Encode civil values as their canonical JSON strings.

    Usable directly with ``json.dumps(payload, cls=CivilJSONEncoder)``. The validation
    mode comes from ``CIVILTIME_VALIDATION`` unless a subclass pins ``validation``.
    """

    validation: ValidationMode | None = None

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.mode = self.validation or get_codec_config().validation

    def default(self, o: Any) -> Any:
        if isinstance(o, (Date, TimeOfDay, DateTime)):
            return o.value(mode=self.mode)
        return super().default(o)


__all__ = ["CivilJSONEncoder"]
