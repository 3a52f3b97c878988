"""Core decoding: header scanner, message decomposer and mako payload."""

from __future__ import annotations

from .config import ParserConfig, resolve_parser_config
from .errors import (
    HostnameError,
    PayloadDecodeError,
    SyslogParseError,
    TagUnterminatedError,
    TimestampFormatError,
)
from .models import FIELD_NAMES, NO_VERSION, Header, LogParts, MakoLevel, Message
from .parser import Parser, parse_line
from .payload import LEVEL_CODES, MakoPayload, decode_payload, normalize

__all__ = [
    "FIELD_NAMES",
    "LEVEL_CODES",
    "NO_VERSION",
    "Header",
    "HostnameError",
    "LogParts",
    "MakoLevel",
    "MakoPayload",
    "Message",
    "Parser",
    "ParserConfig",
    "PayloadDecodeError",
    "SyslogParseError",
    "TagUnterminatedError",
    "TimestampFormatError",
    "decode_payload",
    "normalize",
    "parse_line",
    "resolve_parser_config",
]
