"""Parser configuration and environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

HOSTNAME_ENV = "SYSLOG_MAKO_HOSTNAME"


@dataclass(frozen=True, slots=True)
class ParserConfig:
    # When set, replaces the hostname scan entirely.
    hostname: str | None = None


def resolve_parser_config(cfg: ParserConfig | None = None) -> ParserConfig:
    """Return config with optional env overrides applied.

    An explicit hostname on ``cfg`` wins over the environment.
    """
    if cfg is None:
        cfg = ParserConfig()

    if cfg.hostname:
        return cfg

    env = os.getenv(HOSTNAME_ENV)
    if env is None or env.strip() == "":
        return cfg
    return replace(cfg, hostname=env.strip())
