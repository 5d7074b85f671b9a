# storefront/utils/logging.py
import logging
import sys

import structlog

from storefront.utils.settings import ENVIRONMENT, LOG_LEVEL

_configured = False


def setup_stdlib_logging():
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger("storefront")
    root.addHandler(handler)
    root.setLevel(LOG_LEVEL.upper())


def setup_structlog():
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]

    if ENVIRONMENT in ("production", "staging"):
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging():
    global _configured
    if _configured:
        return
    setup_stdlib_logging()
    setup_structlog()
    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    configure_logging()
    return structlog.get_logger(name)
