"""Header scanner: RFC 3164 timestamp and hostname.

https://tools.ietf.org/html/rfc3164#section-4.1.2
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from .cursor import Cursor, parse_hostname as scan_hostname, skip_space
from .errors import TimestampFormatError
from .models import Header
from .timestamps import current_year

# Year used to validate day and month; it has a Feb 29.
_LEAP_YEAR = 2000

_MONTHS = {
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
}


@dataclass(frozen=True, slots=True)
class TimestampLayout:
    """A fixed-width, year-less header timestamp layout."""

    name: str
    pattern: re.Pattern[bytes]

    @property
    def width(self) -> int:
        return len(self.name)

    def parse(self, raw: bytes, *, year: int) -> datetime | None:
        """Parse ``raw`` strictly in UTC, or return None if it doesn't fit.

        Day and month are checked against a leap year, then placed in
        ``year``; Feb 29 rolls over to Mar 1 when ``year`` has no leap day.
        """
        m = self.pattern.fullmatch(raw)
        if not m:
            return None
        month = _MONTHS.get(m.group("mon").decode("ascii").upper())
        if month is None:
            return None
        day = int(m.group("day"))
        try:
            ts = datetime(
                _LEAP_YEAR,
                month,
                day,
                int(m.group("h")),
                int(m.group("m")),
                int(m.group("s")),
                tzinfo=UTC,
            )
        except ValueError:
            return None
        return ts.replace(year=year, day=1) + timedelta(days=day - 1)


# Order is priority: the first layout that parses wins.
TIMESTAMP_LAYOUTS: tuple[TimestampLayout, ...] = (
    TimestampLayout(
        "Jan 02 15:04:05",
        re.compile(rb"(?P<mon>[A-Za-z]{3}) (?P<day>\d{2}) (?P<h>\d{2}):(?P<m>\d{2}):(?P<s>\d{2})"),
    ),
    TimestampLayout(
        "Jan  2 15:04:05",
        re.compile(rb"(?P<mon>[A-Za-z]{3})  (?P<day>\d) (?P<h>\d{2}):(?P<m>\d{2}):(?P<s>\d{2})"),
    ),
)


def parse_timestamp(
    cur: Cursor,
    *,
    layouts: tuple[TimestampLayout, ...] = TIMESTAMP_LAYOUTS,
) -> tuple[datetime, Cursor]:
    """Consume a header timestamp and one optional trailing space.

    On failure the cursor is forced to the width of the last layout tried
    (plus a following space, if any) and reported on the raised error.
    """
    year = current_year()
    width = 0
    for layout in layouts:
        width = layout.width
        raw = cur.take(width)
        if raw is None:
            continue
        ts = layout.parse(raw, year=year)
        if ts is not None:
            return ts, skip_space(cur.advance(width))

    failed = skip_space(cur.move_to(width))
    raise TimestampFormatError(cursor=failed.pos)


def parse_hostname(cur: Cursor, *, pinned: str | None = None) -> tuple[str, Cursor]:
    """Return the pinned hostname untouched, or scan one from the line."""
    if pinned:
        return pinned, cur
    return scan_hostname(cur)


def parse_header(cur: Cursor, *, hostname: str | None = None) -> tuple[Header, Cursor]:
    """Consume timestamp and hostname; leaves the cursor at the tag."""
    ts, cur = parse_timestamp(cur)
    host, cur = parse_hostname(cur, pinned=hostname)
    return Header(timestamp=ts, hostname=host), skip_space(cur)
