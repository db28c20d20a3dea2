from __future__ import annotations
import logging

from connect4_engine.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """
    Configure the root logger for CLI entry points.
    Library modules only ever call logging.getLogger(__name__).
    """
    lvl = level if level is not None else LOG_LEVEL
    if isinstance(lvl, str):
        lvl = logging.getLevelName(lvl.upper())
        if not isinstance(lvl, int):
            raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(level=lvl, format=LOG_FORMAT, force=True)
