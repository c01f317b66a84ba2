"""Process logging setup shared by the credential services and the operator CLI."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(level: str) -> int:
    """Map a configured level name onto a logging level, defaulting to INFO."""

    resolved = logging.getLevelName(level.strip().upper() or "INFO")
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(*, level: str, stream: TextIO | None = None, force: bool = False) -> None:
    """Send process logs to `stream` (stderr by default) at the configured level.

    Stdout is left untouched so CLI output such as a printed credential record
    can be piped without log lines mixed in.
    """

    logging.basicConfig(
        level=resolve_log_level(level),
        format=_LOG_FORMAT,
        stream=stream if stream is not None else sys.stderr,
        force=force,
    )
