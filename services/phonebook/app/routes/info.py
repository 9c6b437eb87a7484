"""Phonebook summary page."""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse

from ..db import get_store
from ..errors import StorageError
from ..store import ContactStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["info"])


def format_timestamp(moment: datetime) -> str:
    # e.g. "10/19/2026, 3:04:05 PM"
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{moment.month}/{moment.day}/{moment.year}, {hour}:{moment:%M:%S} {suffix}"


@router.get("/info", response_class=HTMLResponse)
def info(store: ContactStore = Depends(get_store)):
    """Report how many contacts are stored, stamped with the current local time.

    Returns:
        HTMLResponse: `<p>Phonebook has info for N people<br/>{timestamp}</p>`, or
        a plain-text 500 carrying the storage error.
    """
    try:
        count = store.count()
    except StorageError as exc:
        return PlainTextResponse(str(exc), status_code=500)
    return HTMLResponse(
        f"<p>Phonebook has info for {count} people<br/>{format_timestamp(datetime.now())}</p>"
    )
