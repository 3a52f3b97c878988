from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

MAKO_LINE = (
    'Oct 11 22:14:15 mymachine app[123]: {"@timestamp":"2003-10-11T22:14:15Z",'
    '"@version":"1","level":40,"message":"m","loggerName":"L"}'
)


@pytest.fixture
def mako_line() -> str:
    return MAKO_LINE


@pytest.fixture
def fixed_year(monkeypatch: pytest.MonkeyPatch) -> int:
    """Pin the year injected into header timestamps."""
    import syslog_mako.core.header as header_module

    monkeypatch.setattr(header_module, "current_year", lambda: 2003)
    return 2003


@pytest.fixture
def write_bytes() -> Callable[[Path, list[bytes]], None]:
    def _write(path: Path, lines: list[bytes]) -> None:
        path.write_bytes(b"".join(line + b"\n" for line in lines))

    return _write
