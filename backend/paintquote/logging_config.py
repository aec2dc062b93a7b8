"""structlog configuration module."""

import logging
import sys

import structlog


def setup_logging(debug: bool = False, level: str | None = None) -> None:
    """
    Configure structlog and stdlib logging.

    Debug mode renders colored console lines; otherwise every event is one
    JSON object per line.

    Args:
        debug: If True, use ConsoleRenderer and DEBUG level.
        level: Explicit level name ("WARNING", "info"...). Overrides the
            level implied by `debug`; unknown names fall back to it.
    """
    default_level = logging.DEBUG if debug else logging.INFO
    log_level = logging.getLevelNamesMapping().get((level or "").upper(), default_level)

    shared_processors: list = [
        structlog.contextvars.merge_contextvars,  # request_id, path
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if debug:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    # uvicorn and fastapi log through stdlib; same stream, same threshold
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)
