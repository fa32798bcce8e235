"""
Structured logging for railway pipelines.

configure_structlog() sets up the same processor chain host applications
use: console output for development, JSON lines for production.

log_outcome() is a tap: it records whether a Result (or UnitResult)
landed on the success or the failure track and hands the same instance
back, so it can sit anywhere in a chain:

    result = (
        load_order(order_id)
        .ensure(lambda o: o.lines, "Order has no lines")
        .on_both(lambda r: log_outcome(r, "order.loaded", order_id=order_id))
    )
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import structlog

from railyard.config import RailyardSettings
from railyard.result import Result, UnitResult

ResultT = TypeVar("ResultT", Result[Any], UnitResult)

log = structlog.get_logger(__name__)


def configure_structlog(log_level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configure structlog for structured logging.

    Unknown level names fall back to INFO.
    """
    renderer = (
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(settings: RailyardSettings | None = None) -> RailyardSettings:
    """Load settings from the environment (unless given) and configure structlog."""
    settings = settings or RailyardSettings()
    configure_structlog(settings.log_level, settings.json_logs)
    return settings


def log_outcome(result: ResultT, event: str, **fields: Any) -> ResultT:
    """
    Log `event` with the railway state and return `result` unchanged.

    Success → info with outcome="success".
    Failure → warning with outcome="failure" and the error message.
    """
    if result.is_success():
        log.info(event, outcome="success", **fields)
    else:
        log.warning(event, outcome="failure", error=result.error(), **fields)
    return result
