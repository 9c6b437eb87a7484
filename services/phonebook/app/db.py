"""Database wiring for the API service.

The service owns exactly one `ContactStore` (and through it one SQLAlchemy
engine with its connection pool). `create_app` puts it on `app.state`; route
handlers receive it through the `get_store` dependency, so tests can hand the
app a store backed by an isolated database.
"""

from fastapi import Request

from common.db import make_engine

from .store import ContactStore


def build_store(database_url: str) -> ContactStore:
    """Create a store over a fresh engine and make sure its table exists."""
    store = ContactStore(make_engine(database_url))
    store.ensure_tables()
    return store


def get_store(request: Request) -> ContactStore:
    """FastAPI dependency returning the application's store.

    Route handlers declare `store: ContactStore = Depends(get_store)`.
    """
    return request.app.state.store
