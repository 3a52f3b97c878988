from __future__ import annotations

from datetime import UTC, datetime

import pytest

from syslog_mako.core.cursor import Cursor
from syslog_mako.core.errors import HostnameError, TimestampFormatError
from syslog_mako.core.header import (
    TIMESTAMP_LAYOUTS,
    parse_header,
    parse_hostname,
    parse_timestamp,
)


def test_two_digit_day(fixed_year: int) -> None:
    ts, cur = parse_timestamp(Cursor(b"Oct 11 22:14:15 mymachine"))
    assert ts == datetime(fixed_year, 10, 11, 22, 14, 15, tzinfo=UTC)
    assert cur.pos == 16


def test_space_padded_single_digit_day(fixed_year: int) -> None:
    ts, cur = parse_timestamp(Cursor(b"Oct  1 22:14:15 mymachine"))
    assert ts == datetime(fixed_year, 10, 1, 22, 14, 15, tzinfo=UTC)
    assert cur.pos == 16


def test_missing_year_is_current_year() -> None:
    ts, _ = parse_timestamp(Cursor(b"Jan 02 15:04:05"))
    assert ts.year == datetime.now(UTC).year
    assert ts.tzinfo is UTC


def test_no_trailing_space_at_end_of_line(fixed_year: int) -> None:
    _, cur = parse_timestamp(Cursor(b"Jan 02 15:04:05"))
    assert cur.pos == 15


def test_layouts_share_width() -> None:
    assert [layout.width for layout in TIMESTAMP_LAYOUTS] == [15, 15]


def test_unknown_format_skips_width_and_space() -> None:
    with pytest.raises(TimestampFormatError) as exc_info:
        parse_timestamp(Cursor(b"not a timestamp here"))
    # forced to the layout width, then over the space found there
    assert exc_info.value.cursor == 16


def test_unknown_format_without_space() -> None:
    with pytest.raises(TimestampFormatError) as exc_info:
        parse_timestamp(Cursor(b"2003-10-11T22:14:15Z host"))
    assert exc_info.value.cursor == 15


def test_short_line_is_unknown_format() -> None:
    with pytest.raises(TimestampFormatError) as exc_info:
        parse_timestamp(Cursor(b"Oct 11"))
    assert exc_info.value.cursor == 15


@pytest.mark.parametrize(
    "raw",
    [
        b"Feb 30 10:00:00 host",
        b"Foo 11 10:00:00 host",
        b"Oct 11 25:00:00 host",
        b"Oct 1 22:14:15 host",
    ],
)
def test_invalid_timestamps(raw: bytes, fixed_year: int) -> None:
    with pytest.raises(TimestampFormatError):
        parse_timestamp(Cursor(raw))


def test_leap_day_rolls_forward_in_non_leap_year(fixed_year: int) -> None:
    ts, cur = parse_timestamp(Cursor(b"Feb 29 10:00:00 host"))
    assert ts == datetime(2003, 3, 1, 10, 0, 0, tzinfo=UTC)
    assert cur.pos == 16


def test_leap_day_kept_in_leap_year(monkeypatch: pytest.MonkeyPatch) -> None:
    import syslog_mako.core.header as header_module

    monkeypatch.setattr(header_module, "current_year", lambda: 2004)
    ts, _ = parse_timestamp(Cursor(b"Feb 29 10:00:00 host"))
    assert ts == datetime(2004, 2, 29, 10, 0, 0, tzinfo=UTC)


def test_pinned_hostname_consumes_nothing() -> None:
    cur = Cursor(b"app: hello", 0)
    host, out = parse_hostname(cur, pinned="pinned")
    assert host == "pinned"
    assert out == cur


def test_scanned_hostname_stops_at_space() -> None:
    host, cur = parse_hostname(Cursor(b"mymachine app: x"))
    assert host == "mymachine"
    assert cur.pos == 9


def test_hostname_too_short() -> None:
    with pytest.raises(HostnameError) as exc_info:
        parse_hostname(Cursor(b"abc", 3))
    assert exc_info.value.cursor == 3


def test_parse_header(fixed_year: int) -> None:
    header, cur = parse_header(Cursor(b"Oct 11 22:14:15 mymachine app: x"))
    assert header.hostname == "mymachine"
    assert header.timestamp == datetime(2003, 10, 11, 22, 14, 15, tzinfo=UTC)
    assert cur.pos == 26


def test_parse_header_missing_hostname(fixed_year: int) -> None:
    with pytest.raises(HostnameError):
        parse_header(Cursor(b"Oct 11 22:14:15"))


def test_parse_header_with_pinned_hostname(fixed_year: int) -> None:
    header, cur = parse_header(Cursor(b"Oct 11 22:14:15 app: x"), hostname="pinned")
    assert header.hostname == "pinned"
    assert cur.pos == 16
