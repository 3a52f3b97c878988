from __future__ import annotations

import argparse
import gzip
import json
import logging
import os
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from syslog_mako.core import Parser, ParserConfig, SyslogParseError, resolve_parser_config

LOG_LEVEL_ENV = "SYSLOG_MAKO_LOG_LEVEL"

logger = logging.getLogger(__name__)


def _configure_logging(level_name: str | None) -> None:
    level_name = (level_name or os.getenv(LOG_LEVEL_ENV) or "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@contextmanager
def _open_binary(source: str) -> Iterator[BinaryIO]:
    """Open a log source for binary line reading (stdin, plain or gzip)."""
    if source == "-":
        yield sys.stdin.buffer
        return

    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")
    if path.suffix.lower() == ".gz":
        with gzip.open(path, "rb") as f:
            yield f
    else:
        with path.open("rb") as f:
            yield f


def _parse_source(source: str, cfg: ParserConfig) -> int:
    """Print one JSON object per parsed line; return the number of failures."""
    failures = 0
    with _open_binary(source) as f:
        for line_no, raw in enumerate(f, start=1):
            line = raw.rstrip(b"\r\n")
            if not line.strip():
                continue

            p = Parser(line, config=cfg)
            try:
                p.parse()
            except SyslogParseError as e:
                failures += 1
                print(f"{source}:{line_no}: {e}", file=sys.stderr)
                continue
            print(json.dumps(p.dump()))

    logger.debug("Finished %s (%d failures)", source, failures)
    return failures


def main(argv: Sequence[str] | None = None) -> None:
    p = argparse.ArgumentParser(description="Decode RFC 3164 syslog lines carrying a mako JSON payload.")
    p.add_argument("paths", nargs="*", default=["-"], help="Log files ('-' or none for stdin, .gz supported)")
    p.add_argument("--hostname", default=None, help="Pin the hostname instead of scanning it (env: SYSLOG_MAKO_HOSTNAME)")
    p.add_argument("--log-level", default=None, help=f"Logging level (env: {LOG_LEVEL_ENV}, default: WARNING)")
    p.add_argument("--skip-invalid", action="store_true", help="Exit 0 even when some lines fail to parse")

    args = p.parse_args(argv)
    _configure_logging(args.log_level)

    cfg = resolve_parser_config(ParserConfig(hostname=args.hostname))

    failures = 0
    try:
        for source in args.paths:
            failures += _parse_source(source, cfg)
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)

    if failures and not args.skip_invalid:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
