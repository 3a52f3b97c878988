"""Single-line parser for RFC 3164 syslog lines carrying a mako payload.

Usage::

    p = Parser(b'Oct 11 22:14:15 mymachine app[123]: {"level":40, ...}')
    p.parse()
    parts = p.dump()

A Parser handles exactly one line; create a new one per line.
"""

from __future__ import annotations

import logging

from .config import ParserConfig
from .cursor import Cursor
from .errors import SyslogParseError
from .header import parse_header
from .message import parse_message
from .models import NO_VERSION, Header, LogParts, Message
from .timestamps import epoch, parse_rfc3339

logger = logging.getLogger(__name__)


class Parser:
    """Decode one syslog line into header, message and mako payload."""

    def __init__(self, buff: bytes | str, *, config: ParserConfig | None = None) -> None:
        if isinstance(buff, str):
            buff = buff.encode("utf-8")
        self._cursor = Cursor(buff)
        self._hostname = config.hostname if config is not None else None
        self._header: Header | None = None
        self._message: Message | None = None
        self.version = NO_VERSION

    def set_hostname(self, hostname: str) -> None:
        """Pin the hostname; the header hostname scan is then skipped."""
        self._hostname = hostname

    @property
    def cursor(self) -> int:
        return self._cursor.pos

    @property
    def header(self) -> Header | None:
        return self._header

    @property
    def message(self) -> Message | None:
        return self._message

    def parse(self) -> None:
        """Parse the line. Errors propagate unchanged; state is set only on success."""
        try:
            header, cur = parse_header(self._cursor, hostname=self._hostname)
            self._cursor = cur
            message, cur = parse_message(self._cursor)
        except SyslogParseError as exc:
            if exc.cursor is not None:
                self._cursor = self._cursor.move_to(exc.cursor)
            raise

        self._cursor = cur
        self._header = header
        self._message = message

    def dump(self) -> LogParts:
        """Project the parsed line onto the flat output field map."""
        if self._header is None or self._message is None or self._message.payload is None:
            raise RuntimeError("dump() called before a successful parse()")

        payload = self._message.payload
        try:
            timestamp = epoch(parse_rfc3339(payload.timestamp))
        except ValueError as exc:
            logger.warning("Error parsing timestamp: %s", exc)
            timestamp = epoch(self._header.timestamp)

        return {
            "timestamp": timestamp,
            "hostname": self._header.hostname,
            "app_name": self._message.app,
            "proc_id": self._message.pid,
            "content": self._message.content,
            "logger_name": payload.logger_name,
            "level": payload.level,
            "level_value": str(payload.level_value),
            "message": payload.message,
            "service_environment": payload.service_environment,
            "service_name": payload.service_name,
            "service_pipeline": payload.service_pipeline,
            "service_version": payload.service_version,
            "thread_name": payload.thread_name,
            "version": str(payload.version),
        }


def parse_line(line: bytes | str, *, config: ParserConfig | None = None) -> LogParts:
    """Parse one line with a fresh Parser and return its dump."""
    p = Parser(line, config=config)
    p.parse()
    return p.dump()
