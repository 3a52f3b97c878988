"""Mako envelope: normalization pass and structured decode."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from .errors import PayloadDecodeError
from .models import MakoLevel

# Two codes share ERROR; keep the table explicit.
LEVEL_CODES: Mapping[int, MakoLevel] = {
    10: MakoLevel.TRACE,
    20: MakoLevel.DEBUG,
    30: MakoLevel.INFO,
    40: MakoLevel.WARN,
    50: MakoLevel.ERROR,
    60: MakoLevel.ERROR,
}

_LEGACY_KEYS: Mapping[str, str] = {
    '"@timestamp"': '"timestamp"',
    '"@version"': '"version"',
}

_SUBSTITUTIONS_RE = re.compile(
    r'"level":('
    + "|".join(str(code) for code in LEVEL_CODES)
    + "),|"
    + "|".join(re.escape(k) for k in _LEGACY_KEYS)
)
_VERSION_STRING_RE = re.compile(r'"version":"[^"]+"')

_JSON_WHITESPACE = " \t\n\r"
_DECODER = json.JSONDecoder()


class MakoPayload(BaseModel):
    """Decoded mako envelope; every field defaults to empty/zero."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        strict=True,
    )

    timestamp: str = ""
    logger_name: str = ""
    level: str = ""
    level_value: int = 0
    message: str = ""
    service_environment: str = ""
    service_name: str = ""
    service_pipeline: str = ""
    service_version: str = ""
    thread_name: str = ""
    version: int = 0

    @field_validator("*", mode="before")
    @classmethod
    def _null_is_default(cls, value: Any, info: ValidationInfo) -> Any:
        # null leaves the field at its zero value
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


def _substitute(m: re.Match[str]) -> str:
    code = m.group(1)
    if code is not None:
        return f'"level":"{LEVEL_CODES[int(code)].value}",'
    return _LEGACY_KEYS[m.group(0)]


def normalize(text: str) -> str:
    """Rewrite numeric levels and legacy keys into their canonical form.

    A quoted version string becomes ``"version":0`` so one numeric field
    accepts both shapes. Already-normalized text is returned unchanged.
    """
    out = _SUBSTITUTIONS_RE.sub(_substitute, text)
    return _VERSION_STRING_RE.sub('"version":0', out)


def _first_object(text: str) -> dict[str, Any]:
    """Decode the first JSON value in ``text``; anything after it is ignored."""
    try:
        obj, _ = _DECODER.raw_decode(text.lstrip(_JSON_WHITESPACE))
    except json.JSONDecodeError as exc:
        raise PayloadDecodeError(str(exc)) from exc
    if not isinstance(obj, dict):
        raise PayloadDecodeError(f"expected a JSON object, got {type(obj).__name__}")
    return obj


def _level_code(content: str) -> int | None:
    """Numeric level code of the top-level ``level`` key in the raw content."""
    try:
        raw = _first_object(content)
    except PayloadDecodeError:
        # raw text that no longer decodes leaves level_value alone
        return None
    code = raw.get("level")
    if type(code) is int and code in LEVEL_CODES:
        return code
    return None


def decode_payload(content: str) -> MakoPayload:
    """Normalize ``content`` and decode it into a MakoPayload.

    When no explicit ``levelValue`` is present, the numeric level code from
    the raw content is kept as ``level_value``.
    """
    obj = _first_object(normalize(content))
    try:
        payload = MakoPayload.model_validate(obj)
    except ValidationError as exc:
        first = exc.errors()[0]
        raise PayloadDecodeError(first["msg"]) from exc

    if "level_value" not in payload.model_fields_set:
        code = _level_code(content)
        if code is not None:
            payload = payload.model_copy(update={"level_value": code})
    return payload
