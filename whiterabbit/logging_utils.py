"""Logging setup in the vLLM manner: prefixed, timestamped, file:line tagged."""

from __future__ import annotations

import logging
import sys
from functools import lru_cache

ROOT_LOGGER_NAME = "whiterabbit"
DATE_FORMAT = "%m-%d %H:%M:%S"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def parse_level(name: str | None) -> int:
    if not name:
        return logging.INFO
    return _LEVELS.get(name.strip().upper(), logging.INFO)


def make_formatter(prefix: str) -> logging.Formatter:
    return logging.Formatter(
        f"{prefix} %(levelname)s %(asctime)s [%(filename)s:%(lineno)d] %(message)s",
        datefmt=DATE_FORMAT,
    )


def configure_logging(level: str | None = "INFO", prefix: str = ROOT_LOGGER_NAME) -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(parse_level(level))
    for handler in list(root.handlers):
        if getattr(handler, "_whiterabbit", False):
            root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(make_formatter(prefix))
    handler._whiterabbit = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.propagate = False
    return root


def init_logger(name: str) -> logging.Logger:
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


@lru_cache(maxsize=None)
def _log_once(logger: logging.Logger, level: int, msg: str) -> None:
    logger.log(level, msg, stacklevel=3)


def warning_once(logger: logging.Logger, msg: str) -> None:
    _log_once(logger, logging.WARNING, msg)
