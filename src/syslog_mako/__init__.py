"""Decoder for RFC 3164 syslog lines carrying a mako JSON envelope."""

from __future__ import annotations

from .core import (
    FIELD_NAMES,
    MakoLevel,
    MakoPayload,
    Parser,
    ParserConfig,
    PayloadDecodeError,
    SyslogParseError,
    TimestampFormatError,
    parse_line,
)

__all__ = [
    "FIELD_NAMES",
    "MakoLevel",
    "MakoPayload",
    "Parser",
    "ParserConfig",
    "PayloadDecodeError",
    "SyslogParseError",
    "TimestampFormatError",
    "parse_line",
]
