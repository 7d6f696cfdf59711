"""Logging setup for the generator service.

structlog renders every entry, including records from the stdlib loggers of
uvicorn, httpx and the anthropic SDK, which reach it through
ProcessorFormatter. The level and the output format both come from Settings:
``debug`` forces DEBUG with the console renderer, otherwise ``log_level`` and
``json_logs`` apply.
"""

import logging
import logging.config

import structlog
from asgi_correlation_id.context import correlation_id

from synthdata.core.config import Settings

# Third-party loggers that only add noise at INFO (per-request access lines,
# connection pool chatter, SDK request dumps).
QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "anthropic")


def add_correlation_id(logger, method, event_dict):
    """Copy the current request id onto the entry when there is one."""
    cid = correlation_id.get(None)
    if cid:
        event_dict["correlation_id"] = cid
    return event_dict


def resolve_log_level(settings: Settings) -> str:
    if settings.debug:
        return "DEBUG"
    return settings.log_level.upper()


def _shared_processors() -> list:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_correlation_id,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def configure_logging(settings: Settings) -> None:
    """Route structlog and stdlib logging through one handler on stdout.

    Safe to call more than once; each call replaces the previous handler
    configuration.

    Args:
        settings: Source of debug, log_level and json_logs
    """
    level = resolve_log_level(settings)
    use_json = settings.json_logs and not settings.debug
    renderer = structlog.processors.JSONRenderer() if use_json else structlog.dev.ConsoleRenderer()
    processors = _shared_processors()

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "synthdata": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processors": [
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    renderer,
                ],
                "foreign_pre_chain": processors,
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "synthdata",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"handlers": ["stdout"], "level": level},
        "loggers": {name: {"level": "WARNING"} for name in QUIET_LOGGERS},
    })

    structlog.configure(
        processors=processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
