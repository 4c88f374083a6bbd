"""Structured logging setup for services using the retrying client.

The library only emits events through ``structlog.get_logger``; the host
application calls configure_logging once at startup to decide where they
go. Everything comes from Settings:
- LOG_LEVEL: root level (botocore/urllib3 never go below WARNING)
- ENVIRONMENT: "production" renders JSON lines, anything else the console
- APP_NAME / APP_VERSION: stamped on every event, so throttling warnings
  from several services sharing one log sink can be told apart
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.types import EventDict, WrappedLogger

from ddb_retry.config import Settings
from ddb_retry.config import settings as default_settings

# Chatty at DEBUG (one line per HTTP request / signature)
NOISY_LOGGERS = ("botocore", "boto3", "urllib3")


class AppContext:
    """structlog processor adding the service name and version."""

    def __init__(self, app_name: str, app_version: str):
        self.app_name = app_name
        self.app_version = app_version

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict.setdefault("app", self.app_name)
        event_dict.setdefault("app_version", self.app_version)
        return event_dict


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Route structlog and stdlib logging through one stdout handler.

    Args:
        settings: Settings to read; the module-level settings when omitted
    """
    settings = settings or default_settings
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    is_production = settings.ENVIRONMENT.lower() == "production"

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        AppContext(settings.APP_NAME, settings.APP_VERSION),
    ]
    if is_production:
        processors.append(structlog.processors.format_exc_info)
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=processors)
    )

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_level=logging.getLevelName(level),
        environment=settings.ENVIRONMENT,
        renderer="json" if is_production else "console",
    )
