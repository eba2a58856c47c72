"""
Structured logging (structlog)

Events are short snake_case names with key/value context, e.g.
logger.error("refresh_failed", error=str(e)). Output goes to stderr so
it never mixes with Streamlit's page output.
"""
import logging
import sys

import structlog

_SHARED_PROCESSORS = (
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.dev.set_exc_info,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
)


def _renderers(json_output: bool) -> list:
    if json_output:
        # Tracebacks become a string field in JSON lines
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer()]


def setup_logging(json_output: bool = False, log_level: str = "INFO") -> None:
    """
    Configure structlog once at startup

    Args:
        json_output: JSON lines instead of the colored console format
        log_level: level name; unknown names fall back to INFO
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, *_renderers(json_output)],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # supabase and httpx log through the standard library
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)


def get_logger(name: str):
    """structlog logger bound to a module name"""
    return structlog.get_logger(name)
