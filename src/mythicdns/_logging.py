"""Logging utilities for the mythicdns library."""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

_root = logging.getLogger("mythicdns")
_root.addHandler(logging.NullHandler())

# Challenge domain of the present/cleanup call running in this context
_current_domain: ContextVar[str | None] = ContextVar("current_domain", default=None)


def set_domain(domain: str | None) -> Token[str | None]:
    """Set the challenge domain for logging context.

    Returns:
        Token to pass to reset_domain().
    """
    return _current_domain.set(domain)


def reset_domain(token: Token[str | None]) -> None:
    """Restore the domain that was current before set_domain()."""
    _current_domain.reset(token)


@contextmanager
def domain_context(domain: str) -> Iterator[None]:
    """Tag log records emitted inside the block with a challenge domain.

    Usage:
        with domain_context("www.example.com"):
            logger.debug("Submitting command", extra=log_extra(zone="example.com"))
    """
    token = set_domain(domain)
    try:
        yield
    finally:
        reset_domain(token)


def log_extra(**fields: object) -> dict[str, object]:
    """Build log extra fields, adding the current challenge domain if set."""
    domain = _current_domain.get()
    if domain is None:
        return fields
    return {"domain": domain, **fields}


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the mythicdns namespace.

    Args:
        name: The module name (typically __name__).
    """
    return logging.getLogger(name)


class Timer:
    """Context manager measuring wall time in milliseconds.

    Usage:
        with Timer() as t:
            response = httpx.post(...)
        logger.debug("API responded", extra=log_extra(elapsed_ms=t.elapsed_ms))
    """

    def __init__(self) -> None:
        self.elapsed_ms: float = 0
        self._start: float = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args: object) -> None:
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000
