"""Contact record routes.

Each handler is a direct adapter over one `ContactStore` operation: it calls
the store and turns the returned outcome into a response. Database failures and
malformed ids are not handled here; they propagate to the application's error
handler (see `main.py`).
"""

import logging

from fastapi import APIRouter, Body, Depends, Response
from fastapi.responses import JSONResponse

from ..db import get_store
from ..models import NotFound, ValidationFailed
from ..schemas import ErrorOut, PersonIn, PersonOut
from ..store import ContactStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["persons"])

MISSING_FIELDS_ERROR = "The name and number must be provided."
NOT_FOUND_ERROR = "Person not found with the provided ID"


@router.get("/persons", response_model=list[PersonOut])
def list_persons(store: ContactStore = Depends(get_store)):
    """Return every contact as a JSON array."""
    return [c.to_dict() for c in store.list_all()]


@router.get(
    "/persons/{person_id}",
    response_model=PersonOut,
    responses={404: {"description": "No contact with this id"}},
)
def get_person(person_id: str, store: ContactStore = Depends(get_store)):
    """Fetch a single contact.

    Args:
        person_id: 24-character hex id.
        store: Contact store (injected).

    Returns:
        dict: `{id, name, number}`, or an empty 404 when the id is unknown.

    Notes:
        A malformed id raises `InvalidIdError`, which the application answers
        with a 500. That is a known defect kept on purpose until a 400 mapping
        is agreed on.
    """
    logger.debug("querying for id %s", person_id)
    result = store.find_by_id(person_id)
    if isinstance(result, NotFound):
        logger.debug("no person found for id %s", person_id)
        return Response(status_code=404)
    logger.debug("found person %s", result)
    return result.to_dict()


@router.delete(
    "/persons/{person_id}",
    status_code=204,
    responses={404: {"model": ErrorOut}},
)
def delete_person(person_id: str, store: ContactStore = Depends(get_store)):
    """Delete a contact; 204 on success, 404 with an error body otherwise."""
    result = store.delete_by_id(person_id)
    if isinstance(result, NotFound):
        return JSONResponse(status_code=404, content={"error": NOT_FOUND_ERROR})
    return Response(status_code=204)


@router.post(
    "/persons",
    response_model=PersonOut,
    responses={400: {"model": ErrorOut}},
)
def create_person(
    payload: PersonIn | None = Body(default=None),
    store: ContactStore = Depends(get_store),
):
    """Create a contact from `{name, number}`.

    The presence check here only short-circuits obviously incomplete requests;
    the store re-validates every draft (including the name's minimum length).
    Both rejections answer with the same 400 message.

    Returns:
        dict: The stored contact including its generated id.
    """
    if payload is None or not payload.name or not payload.number:
        return JSONResponse(status_code=400, content={"error": MISSING_FIELDS_ERROR})

    result = store.create(payload.name, payload.number)
    if isinstance(result, ValidationFailed):
        return JSONResponse(status_code=400, content={"error": MISSING_FIELDS_ERROR})
    return result.to_dict()
