"""Core data models for the mako syslog decoder."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .payload import MakoPayload

# RFC 3164 lines carry no protocol version field.
NO_VERSION = -1


class MakoLevel(str, Enum):
    """Symbolic severities used by the mako envelope."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


LogParts = dict[str, str]

FIELD_NAMES: tuple[str, ...] = (
    "timestamp",
    "hostname",
    "app_name",
    "proc_id",
    "content",
    "logger_name",
    "level",
    "level_value",
    "message",
    "service_environment",
    "service_name",
    "service_pipeline",
    "service_version",
    "thread_name",
    "version",
)


@dataclass(frozen=True, slots=True)
class Header:
    """Timestamp + hostname prefix of a syslog line."""

    timestamp: datetime
    hostname: str


@dataclass(frozen=True, slots=True)
class Message:
    """Tag, pid and content of a syslog line plus its decoded payload."""

    app: str
    pid: str
    content: str
    payload: MakoPayload | None = None  # None until the content decodes
