"""
Structured logging configuration for the deal message parser.

Uses structlog for structured, context-aware logging with:
- JSON output for production
- Pretty console output for development
- Stage timing for the extraction pipeline
- Trace ID / user ID propagation from the calling request
"""

import logging
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Generator

import structlog
from structlog.types import Processor

from .config import config

# Context variables for request-scoped data
_trace_id: ContextVar[str | None] = ContextVar('trace_id', default=None)
_user_id: ContextVar[str | None] = ContextVar('user_id', default=None)


def get_trace_id() -> str | None:
    """Get the current trace ID from context."""
    return _trace_id.get()


def get_user_id() -> str | None:
    """Get the current user ID from context."""
    return _user_id.get()


def add_context_info(
    logger: structlog.types.WrappedLogger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Processor that adds context variables to log entries."""
    trace_id = get_trace_id()
    user_id = get_user_id()

    if trace_id:
        event_dict['trace_id'] = trace_id
    if user_id:
        event_dict['user_id'] = user_id

    return event_dict


def configure_logging(
    json_output: bool | None = None,
    log_level: str | None = None,
) -> None:
    """
    Configure structlog for the application.

    Args:
        json_output: If True, output JSON logs (for production).
                    If False, output pretty console logs (for development).
                    Defaults to config.LOG_JSON.
        log_level: Override log level (defaults to config.LOG_LEVEL)
    """
    if json_output is None:
        json_output = config.LOG_JSON
    level = log_level or config.LOG_LEVEL
    level_num = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        format='%(message)s',
        stream=sys.stdout,
        level=level_num,
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        add_context_info,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_num),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


@contextmanager
def logging_context(
    trace_id: str | None = None,
    user_id: str | None = None,
) -> Generator[None, None, None]:
    """
    Context manager for setting logging context variables.

    Usage:
        with logging_context(trace_id="abc123", user_id="creator_1"):
            extract_deal(message)  # log lines include trace_id and user_id
    """
    old_trace = _trace_id.get()
    old_user = _user_id.get()

    try:
        if trace_id is not None:
            _trace_id.set(trace_id)
        if user_id is not None:
            _user_id.set(user_id)
        yield
    finally:
        _trace_id.set(old_trace)
        _user_id.set(old_user)


class PipelineTimer:
    """
    Timer for tracking extraction stage durations.

    Usage:
        timer = PipelineTimer()
        with timer.stage("amount"):
            ...
        with timer.stage("brand"):
            ...
        log.debug("timings", **timer.summary())
    """

    def __init__(self):
        self.stages: dict[str, float] = {}
        self.start_time: float = time.perf_counter()

    @contextmanager
    def stage(self, name: str) -> Generator[None, None, None]:
        """Time a pipeline stage."""
        stage_start = time.perf_counter()
        try:
            yield
        finally:
            self.stages[name] = (time.perf_counter() - stage_start) * 1000

    @property
    def total_ms(self) -> float:
        """Total elapsed time since timer creation in milliseconds."""
        return (time.perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get timing summary as a dictionary."""
        return {
            'total_ms': round(self.total_ms, 3),
            'stages': {k: round(v, 3) for k, v in self.stages.items()},
        }


# Initialize logging on module import (development mode by default)
# Production deployments should call configure_logging(json_output=True)
configure_logging()
