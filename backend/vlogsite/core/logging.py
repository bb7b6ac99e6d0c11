from __future__ import annotations

import logging

from vlogsite.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    root = logging.getLogger()
    resolved = logging.getLevelName((level or settings.LOG_LEVEL).upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    root.setLevel(resolved)

    # create_app() may run more than once per process (tests).
    if any(getattr(h, "_vlogsite", False) for h in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._vlogsite = True  # type: ignore[attr-defined]
    root.addHandler(handler)
