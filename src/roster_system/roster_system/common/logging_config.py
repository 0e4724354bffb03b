from __future__ import annotations

import logging

LOG_FORMAT = "[%(asctime)s][%(levelname)s] %(name)s: %(message)s"


def configure_logging(*, debug: bool = False, level: str | None = None) -> None:
    """Install a single stream handler on the root logger.

    `debug` forces DEBUG; otherwise `level` (a name such as "INFO") is used.
    Calling it again only adjusts the level.
    """
    if debug:
        logging_level = logging.DEBUG
    else:
        logging_level = getattr(logging, (level or "INFO").upper(), logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(logging_level)

    for handler in logger.handlers:
        if getattr(handler, "_roster_system", False):
            handler.setLevel(logging_level)
            return

    stream = logging.StreamHandler()
    stream.setLevel(logging_level)
    stream.setFormatter(logging.Formatter(LOG_FORMAT))
    stream._roster_system = True  # type: ignore[attr-defined]
    logger.addHandler(stream)
