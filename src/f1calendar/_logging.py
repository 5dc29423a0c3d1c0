"""Logging setup and upstream call logging."""

from __future__ import annotations

import functools
import logging
import sys
import threading
import time
from typing import Any, Awaitable, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])

LOGGER_NAME = "f1calendar"
_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

_configured = False
_config_lock = threading.Lock()


def configure_logging(level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """Attach handlers to the package logger, once per process.

    Every module logs through ``logging.getLogger(__name__)``, so records from
    ``f1calendar.*`` end up here.
    """
    global _configured
    logger = logging.getLogger(LOGGER_NAME)
    if _configured:
        return logger

    with _config_lock:
        if _configured:
            return logger

        logger.setLevel(level.upper())
        logger.propagate = False

        formatter = logging.Formatter(_FORMAT)
        stream = logging.StreamHandler(sys.stderr)
        stream.setFormatter(formatter)
        logger.addHandler(stream)

        if log_file:
            handler = logging.FileHandler(log_file, encoding="utf-8")
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        _configured = True

    return logger


def reset_logging() -> None:
    """Close and drop the package handlers so the next configure starts clean."""
    global _configured
    logger = logging.getLogger(LOGGER_NAME)
    with _config_lock:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
        _configured = False


def log_upstream_call(fn: F) -> F:
    """Decorator that logs transport fetches and their outcome."""
    logger = logging.getLogger(f"{LOGGER_NAME}.upstream")

    @functools.wraps(fn)
    async def wrapper(self: Any, endpoint: str, *args: Any, **kwargs: Any) -> Any:
        target = f"{getattr(self, 'base_url', '')}{endpoint}"
        logger.debug("CALL: GET %s %s", target, kwargs.get("params") or "")

        start = time.monotonic()
        result = await fn(self, endpoint, *args, **kwargs)
        elapsed = time.monotonic() - start
        if result.ok:
            logger.info("OK: GET %s (%.3fs)", result.url, elapsed)
        else:
            logger.warning(
                "FAIL: GET %s -> %s: %s (%.3fs)",
                result.url, result.failure.kind.value, result.failure.message, elapsed,
            )
        return result

    return wrapper  # type: ignore[return-value]
