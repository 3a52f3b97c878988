"""Timestamp helpers shared by the header scanner and the dump step."""

from __future__ import annotations

import math
import re
from datetime import UTC, datetime

_RFC3339_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:[Zz]|[+-]\d{2}:\d{2})$"
)


def current_year() -> int:
    """Year injected into header timestamps, which never carry one."""
    return datetime.now(UTC).year


def parse_rfc3339(s: str) -> datetime:
    """Parse an RFC 3339 timestamp into an aware UTC datetime.

    Raises ValueError for anything else, including ISO 8601 forms RFC 3339
    does not allow (date only, missing offset).
    """
    if not _RFC3339_RE.match(s):
        raise ValueError(f"not an RFC 3339 timestamp: {s!r}")
    dt = datetime.fromisoformat(s.upper().replace("Z", "+00:00"))
    return dt.astimezone(UTC)


def epoch(dt: datetime) -> str:
    """Render whole epoch seconds as a base-10 string."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return str(math.floor(dt.timestamp()))
