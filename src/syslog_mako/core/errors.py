"""Errors raised while decoding a syslog line.

Every error records the read position reached when it was raised, so callers
that probe several formats can resume from where this one stopped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Message


class SyslogParseError(ValueError):
    """Base class for all line decoding failures."""

    def __init__(self, reason: str, *, cursor: int | None = None) -> None:
        super().__init__(reason)
        self.cursor = cursor


class TimestampFormatError(SyslogParseError):
    """None of the known header timestamp layouts matched."""

    def __init__(self, *, cursor: int) -> None:
        super().__init__("unknown timestamp format", cursor=cursor)


class HostnameError(SyslogParseError):
    """Hostname scan started at or past the end of the buffer."""

    def __init__(self, *, cursor: int) -> None:
        super().__init__("hostname too short", cursor=cursor)


class TagUnterminatedError(SyslogParseError):
    """The application tag ran to the end of the line without a delimiter."""

    def __init__(self, tag: str, *, cursor: int) -> None:
        super().__init__(f"unterminated tag: {tag!r}", cursor=cursor)
        self.tag = tag


class PayloadDecodeError(SyslogParseError):
    """Normalized content is not a valid mako payload.

    ``message`` holds the tag, pid and content that were extracted before
    decoding failed (``None`` when decoding was called directly).
    """

    def __init__(
        self,
        reason: str,
        *,
        message: Message | None = None,
        cursor: int | None = None,
    ) -> None:
        super().__init__(f"invalid mako payload: {reason}", cursor=cursor)
        self.reason = reason
        self.message = message
