import logging
import sys

import structlog

from business_id.config import get_settings

LOGGER_NAMESPACE = "business_id"

# Silent until the application configures handlers
logging.getLogger(LOGGER_NAMESPACE).addHandler(logging.NullHandler())


def qualified_logger_name(name: str | None = None) -> str:
    """Place a logger name under the business_id namespace, once."""
    if name is None or name == LOGGER_NAMESPACE:
        return LOGGER_NAMESPACE
    if name.startswith(f"{LOGGER_NAMESPACE}."):
        return name
    return f"{LOGGER_NAMESPACE}.{name}"


def get_logger(name: str | None = None):
    """
    Get a logger under the business_id namespace.

    The structlog logger wraps a stdlib logger, so events only reach an
    output once handlers are configured (see setup_logging).

    Args:
        name: Module name (typically __name__). If None, returns the root business_id logger.

    Returns:
        A structlog logger in the business_id namespace.
    """
    return structlog.wrap_logger(logging.getLogger(qualified_logger_name(name)))


def setup_third_party_logging(debug_all: bool = False):
    """
    Configure third-party library logging levels.

    Args:
        debug_all: If True, leave every library at the root level.
                   If False, set third-party loggers to WARNING level.
    """

    if debug_all:
        return

    for log_name in list(logging.Logger.manager.loggerDict):
        if log_name.split(".")[0] != LOGGER_NAMESPACE:
            logging.getLogger(log_name).setLevel(logging.WARNING)


def format_context(logger, method_name, event_dict):
    """Format bound context into the event message"""
    excluded = {"level", "timestamp", "logger", "stack", "exc_info", "event"}
    context = " ".join(f"{k}={v}" for k, v in event_dict.items() if k not in excluded)

    event = event_dict.get("event", "")
    event_dict["event"] = f"{event} [{context}]" if context else event

    return event_dict


def setup_logging() -> None:
    """
    Setup logging for the application.

    Levels come from LoggingSettings:
        DEBUG_ALL: enable DEBUG logging for all libraries.
        LOG_LEVEL: level of the business_id namespace (default INFO).
    """
    settings = get_settings().logging

    # Root logger level - WARNING by default, DEBUG only if DEBUG_ALL is set
    root_level = "DEBUG" if settings.debug_all else "WARNING"
    logging.basicConfig(
        stream=sys.stderr,
        level=root_level,
        format="%(levelname)s:%(name)s: %(message)s",
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            format_context,
            structlog.stdlib.render_to_log_kwargs,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    setup_third_party_logging(settings.debug_all)

    logging.getLogger(LOGGER_NAMESPACE).setLevel(settings.log_level)
