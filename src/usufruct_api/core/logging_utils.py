# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Central logging utilities for the Usufruct API.

This module enforces a consistent logging configuration across the
code-base and ties every log record to the correlation identifier of the
request that produced it.

Key Features
------------
1. configure_logging(): idempotent initialization of the root logger.
2. get_logger(name): typed helper that always returns a configured logger.
3. correlation_scope(): binds a correlation id to the current context so
   records emitted without an explicit ``extra`` still carry it.

Core components pass ``extra={"correlation_id": ...}`` explicitly; the
context variable is the fallback for records emitted by the HTTP layer.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Final

from beartype import beartype

__all__: Final = [
    "CorrelationIdFilter",
    "configure_logging",
    "correlation_scope",
    "current_correlation_id",
    "get_logger",
]

_DEFAULT_LOG_FORMAT: Final = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] - %(message)s"
)
_NO_CORRELATION: Final = "-"

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default=_NO_CORRELATION)
_is_configured: bool = False


class CorrelationIdFilter(logging.Filter):
    """Stamp records with the active correlation id unless one was passed."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = _correlation_id.get()
        return True


@beartype
def current_correlation_id() -> str:
    """Return the correlation id bound to the current context."""
    return _correlation_id.get()


@contextmanager
def correlation_scope(correlation_id: str) -> Iterator[None]:
    """Bind ``correlation_id`` for the duration of the block."""
    token = _correlation_id.set(correlation_id)
    try:
        yield
    finally:
        _correlation_id.reset(token)


@beartype
def configure_logging(
    *, level: int | str | None = None, fmt: str = _DEFAULT_LOG_FORMAT
) -> None:
    """Configure the root logger exactly once.

    Calling this function multiple times is safe: handlers and format are
    only installed on the first invocation, later calls may only change
    the root level.
    """
    global _is_configured
    if _is_configured:
        if level is not None:
            logging.getLogger().setLevel(level)
        return

    logging.basicConfig(level=level if level is not None else logging.INFO, format=fmt)
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, CorrelationIdFilter) for f in handler.filters):
            handler.addFilter(CorrelationIdFilter())
    _is_configured = True


@beartype
def get_logger(name: str | None = None, *, level: int | None = None) -> logging.Logger:
    """Return a module-scoped logger that is guaranteed to be configured."""
    configure_logging()
    logger = logging.getLogger(name or "usufruct_api")
    if level is not None:
        logger.setLevel(level)
    return logger
