"""Message decomposer: tag, pid and content."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum

from .cursor import Cursor, decode_text, skip_space
from .errors import PayloadDecodeError, TagUnterminatedError
from .models import Message
from .payload import decode_payload

_OPEN_BRACKET = ord("[")
_CLOSE_BRACKET = ord("]")
_END_OF_TAG = frozenset(b": ")


class Signal(Enum):
    """Terminal conditions of content extraction (not errors)."""

    EOL = "eol"


def parse_app(cur: Cursor) -> tuple[str, str, Cursor]:
    """Consume ``app``, ``app:``, ``app[pid]`` or ``app[pid]:`` and one trailing space.

    The pid is empty when no bracket is present. Raises
    TagUnterminatedError if the line ends before any delimiter.
    """
    buff = cur.buff
    start = pos = cur.pos
    app: bytes | None = None
    pid: bytes | None = None

    while True:
        if pos >= len(buff):
            raise TagUnterminatedError(decode_text(buff[cur.pos :]), cursor=pos)

        b = buff[pos]
        if b == _OPEN_BRACKET:
            if app is None:
                app = buff[start:pos]
                start = pos
        elif b == _CLOSE_BRACKET:
            if app is None:
                app = buff[start:pos]
            elif pid is None:
                pid = buff[start + 1 : pos]
            # bracket plus one separator
            pos += 2
            break
        elif b in _END_OF_TAG:
            if app is None:
                app = buff[start:pos]
            elif pid is None:
                # an unclosed pid keeps its opening bracket
                pid = buff[start:pos]
            pos += 1
            break
        pos += 1

    return decode_text(app or b""), decode_text(pid or b""), skip_space(cur.move_to(pos))


def parse_content(cur: Cursor) -> tuple[str, Signal, Cursor]:
    """Take the space-trimmed rest of the line; always signals end of line."""
    if cur.pos > cur.length:
        return "", Signal.EOL, cur

    content = cur.buff[cur.pos :].strip(b" ")
    return decode_text(content), Signal.EOL, cur.advance(len(content))


def parse_message(cur: Cursor) -> tuple[Message, Cursor]:
    """Consume tag, pid and content, then decode the content as a mako payload.

    A PayloadDecodeError still reports the extracted message and the
    cursor past the content.
    """
    app, pid, cur = parse_app(cur)
    content, _, cur = parse_content(cur)
    msg = Message(app=app, pid=pid, content=content)

    try:
        payload = decode_payload(content)
    except PayloadDecodeError as exc:
        raise PayloadDecodeError(exc.reason, message=msg, cursor=cur.pos) from exc
    return replace(msg, payload=payload), cur
