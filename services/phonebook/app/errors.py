"""Exception types raised by the phonebook service.

Expected outcomes of store operations (a missing record, a rejected draft) are
returned as values, see `store.py`. Exceptions are reserved for conditions the
router does not recover from; they all reach the generic handler in `main.py`.
"""


class PhonebookError(Exception):
    """Base class for service errors surfaced as HTTP 500."""


class StorageError(PhonebookError):
    """The database failed (connectivity, timeout, missing table, ...)."""


class InvalidIdError(PhonebookError):
    """An id does not have the store's identifier shape."""

    def __init__(self, value: str):
        super().__init__(f"malformed id: {value!r}")
        self.value = value


class ConfigError(PhonebookError):
    """Required configuration is missing or invalid at startup."""
