"""Module entrypoint.

Allows:
    python -m syslog_mako
"""

from __future__ import annotations

from syslog_mako.cli import main

if __name__ == "__main__":
    main()
