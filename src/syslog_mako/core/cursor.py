"""Read cursor over a raw line and the scanning primitives shared by syslog formats."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import HostnameError

SPACE = 0x20


def decode_text(raw: bytes) -> str:
    """Decode a slice of the line buffer, keeping undecodable bytes visible."""
    return raw.decode("utf-8", errors="replace")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable line buffer plus a read position.

    ``pos`` may run one or more bytes past ``len(buff)`` to mark a fully
    consumed line.
    """

    buff: bytes
    pos: int = 0

    @property
    def length(self) -> int:
        return len(self.buff)

    @property
    def exhausted(self) -> bool:
        return self.pos >= len(self.buff)

    def peek(self) -> int | None:
        """Return the byte under the cursor, or None past the end."""
        if 0 <= self.pos < len(self.buff):
            return self.buff[self.pos]
        return None

    def take(self, width: int) -> bytes | None:
        """Return exactly ``width`` bytes from the cursor, or None if they don't fit."""
        end = self.pos + width
        if end > len(self.buff):
            return None
        return self.buff[self.pos : end]

    def advance(self, n: int = 1) -> Cursor:
        return Cursor(self.buff, self.pos + n)

    def move_to(self, pos: int) -> Cursor:
        return Cursor(self.buff, pos)


def skip_space(cur: Cursor) -> Cursor:
    """Step over a single space if one is under the cursor."""
    if cur.peek() == SPACE:
        return cur.advance()
    return cur


def parse_hostname(cur: Cursor) -> tuple[str, Cursor]:
    """Scan a hostname up to the next space (or end of line).

    The returned cursor rests on the separator, not past it.
    """
    if cur.exhausted:
        raise HostnameError(cursor=cur.pos)

    end = cur.buff.find(b" ", cur.pos)
    if end < 0:
        end = cur.length
    return decode_text(cur.buff[cur.pos : end]), cur.move_to(end)
