"""Contact persistence.

`ContactStore` is the only component that talks to the database. It owns a
SQLAlchemy engine and checks a pooled connection out per operation, so a single
instance is safe to share between concurrent requests.

Ids follow the document-database object id shape (24 hex characters). A value
of any other shape raises `InvalidIdError` before a query is issued.
"""

import logging
import re
import secrets
from contextlib import contextmanager

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .errors import InvalidIdError, StorageError
from .models import Contact, Deleted, NotFound, ValidationFailed
from .schemas import NAME_MIN_LENGTH, validate_draft

logger = logging.getLogger(__name__)

_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")

_DDL = f"""
CREATE TABLE IF NOT EXISTS persons (
  id VARCHAR(24) PRIMARY KEY,
  name TEXT NOT NULL CHECK (length(name) >= {NAME_MIN_LENGTH}),
  number TEXT NOT NULL CHECK (length(number) >= 1)
)
"""


def new_id() -> str:
    """Generate a fresh 24-hex-character record id."""
    return secrets.token_hex(12)


def parse_id(value: str) -> str:
    """Normalize `value` to a stored id.

    Raises:
        InvalidIdError: If `value` is not 24 hexadecimal characters.
    """
    if not isinstance(value, str) or not _ID_RE.match(value):
        raise InvalidIdError(str(value))
    return value.lower()


def _row_to_contact(row) -> Contact:
    return Contact(id=row["id"], name=row["name"], number=row["number"])


class ContactStore:
    def __init__(self, engine: Engine):
        self.engine = engine

    def ensure_tables(self) -> None:
        """Create the `persons` table if it does not exist."""
        with self._begin() as conn:
            conn.execute(text(_DDL))

    def list_all(self) -> list[Contact]:
        """Return every stored contact, in no particular order.

        Raises:
            StorageError: If the query fails.
        """
        with self._begin() as conn:
            rows = conn.execute(text("SELECT id, name, number FROM persons")).mappings().all()
        return [_row_to_contact(r) for r in rows]

    def find_by_id(self, contact_id: str) -> Contact | NotFound:
        """Look up one contact.

        Args:
            contact_id: 24-character hex id, any letter case.

        Returns:
            Contact | NotFound: The record, or `NotFound` when no row has the id.

        Raises:
            InvalidIdError: If `contact_id` is not a well-formed id.
            StorageError: If the query fails.
        """
        key = parse_id(contact_id)
        with self._begin() as conn:
            row = conn.execute(
                text("SELECT id, name, number FROM persons WHERE id = :id"),
                {"id": key},
            ).mappings().first()
        if not row:
            return NotFound(id=key)
        return _row_to_contact(row)

    def create(self, name, number) -> Contact | ValidationFailed:
        """Validate and persist a new contact.

        Args:
            name: Display name, at least three characters.
            number: Phone number, any non-empty text.

        Returns:
            Contact | ValidationFailed: The stored record with its generated id,
            or the reasons the input was rejected. Nothing is written on
            rejection.

        Raises:
            StorageError: If the insert fails.
        """
        draft = validate_draft(name, number)
        if isinstance(draft, ValidationFailed):
            logger.info("rejected contact draft: %s", draft.errors)
            return draft

        contact = Contact(id=new_id(), name=draft.name, number=draft.number)
        with self._begin() as conn:
            conn.execute(
                text("INSERT INTO persons (id, name, number) VALUES (:id, :name, :number)"),
                contact.to_dict(),
            )
        return contact

    def delete_by_id(self, contact_id: str) -> Deleted | NotFound:
        """Remove one contact.

        Deleting an id that is already gone returns `NotFound` again.

        Args:
            contact_id: 24-character hex id, any letter case.

        Returns:
            Deleted | NotFound: Whether a row was removed.

        Raises:
            InvalidIdError: If `contact_id` is not a well-formed id.
            StorageError: If the delete fails.
        """
        key = parse_id(contact_id)
        with self._begin() as conn:
            res = conn.execute(text("DELETE FROM persons WHERE id = :id"), {"id": key})
        if res.rowcount == 0:
            return NotFound(id=key)
        return Deleted(id=key)

    def count(self) -> int:
        """Return the number of stored contacts.

        Raises:
            StorageError: If the query fails.
        """
        with self._begin() as conn:
            return int(conn.execute(text("SELECT COUNT(*) FROM persons")).scalar_one())

    def close(self) -> None:
        """Release pooled connections."""
        self.engine.dispose()

    @contextmanager
    def _begin(self):
        try:
            with self.engine.begin() as conn:
                yield conn
        except SQLAlchemyError as exc:
            logger.exception("database operation failed")
            raise StorageError(str(exc)) from exc
