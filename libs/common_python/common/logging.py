"""Shared logging setup.

Every process entrypoint (API server, seeding job) calls `configure_logging`
once so that all components emit the same line format, tagged with the name of
the service that produced them.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(service)s] %(name)s: %(message)s"


class ServiceHandler(logging.StreamHandler):
    """stderr handler installed by `configure_logging`."""

    def __init__(self, service: str):
        super().__init__(sys.stderr)
        self.setFormatter(logging.Formatter(LOG_FORMAT))
        self.addFilter(_ServiceFilter(service))


class _ServiceFilter(logging.Filter):
    def __init__(self, service: str):
        super().__init__()
        self.service = service

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "service"):
            record.service = self.service
        return True


def configure_logging(service: str, level: str = "INFO") -> None:
    """Install a stderr handler on the root logger.

    Calling this again replaces the handler installed by the previous call, so
    tests and reloads do not duplicate output.

    Args:
        service: Name stamped on every record (e.g. "phonebook").
        level: Root log level name.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, ServiceHandler):
            root.removeHandler(handler)

    root.addHandler(ServiceHandler(service))
    root.setLevel(level.upper())
