"""Per-call IDs for the client's log records, and an opt-in console handler.

The library never configures logging on import. Every module logs under the
``supadata_client`` logger, and each API call runs with its own ID in
``call_id_var`` so the records of one request can be grouped together.
Applications that already have logging set up only need to add
``CallIDFilter`` to their handler to get ``%(call_id)s`` in their format.
"""

import logging
import sys
import uuid
from contextvars import ContextVar

LOGGER_NAME = "supadata_client"
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(call_id)s] %(name)s - %(message)s"

# "-" outside of an API call
call_id_var: ContextVar[str] = ContextVar("call_id", default="-")

_handler: logging.Handler | None = None


class CallIDFilter(logging.Filter):
    """Stamp records with the ID of the API call in progress."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.call_id = call_id_var.get()  # type: ignore[attr-defined]
        return True


def generate_call_id() -> str:
    return uuid.uuid4().hex[:12]


def setup_logging(level: str = "INFO", *, quiet_http: bool = False) -> logging.Handler:
    """Send the client's own log records to stderr.

    Only the ``supadata_client`` logger is touched; handlers on the root
    logger and on other libraries are left alone. Calling this again
    replaces the handler added by the previous call.

    Args:
        level: Level name for the client logger (DEBUG, INFO, WARNING, ...).
        quiet_http: Also raise the httpx and httpcore loggers to WARNING.

    Returns:
        The handler that was installed.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(CallIDFilter())

    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    _handler = handler

    if quiet_http:
        for name in ("httpx", "httpcore"):
            logging.getLogger(name).setLevel(logging.WARNING)

    return handler
