"""Call logging for the storage layer."""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

from pydantic import BaseModel

F = TypeVar("F", bound=Callable[..., Any])

_LOG_DIR = os.environ.get("KARTSTANDINGS_LOG_DIR", os.path.join(os.getcwd(), "logs"))
_LOG_FILE = os.path.join(_LOG_DIR, "kartstandings.log")

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        logger = logging.getLogger("kartstandings")
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        if not logger.handlers:
            try:
                os.makedirs(_LOG_DIR, exist_ok=True)
                handler: logging.Handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
            except OSError:
                handler = logging.NullHandler()
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            logger.addHandler(handler)
        _logger = logger

    return _logger


def _summarize(value: Any) -> str:
    """Short representation of an argument; models are reduced to their id."""
    if isinstance(value, BaseModel):
        return f"{type(value).__name__}(id={getattr(value, 'id', None)!r})"
    return repr(value)


def _arg_string(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    parts = [_summarize(a) for a in args[1:]]
    parts += [f"{k}={_summarize(v)}" for k, v in kwargs.items()]
    return ", ".join(parts)


def log_storage_call(fn: F) -> F:
    """Decorator that logs repository and store method calls."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        arg_str = _arg_string(args, kwargs)
        logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info(
                "OK: %s(%s) -> %s (%.3fs)",
                fn.__qualname__, arg_str, type(result).__name__, elapsed,
            )
            return result
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
            )
            raise

    return wrapper  # type: ignore[return-value]

