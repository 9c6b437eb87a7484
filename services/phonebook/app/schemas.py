"""Request/response schemas.

`PersonIn` describes what clients may send; both fields are optional there so
the router can answer a missing field with its own 400 payload instead of
FastAPI's 422. Numbers are accepted as text. `ContactDraft` is the authoritative shape the store accepts.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .models import ValidationFailed

NAME_MIN_LENGTH = 3


class PersonIn(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    name: str | None = None
    number: str | None = None


class PersonOut(BaseModel):
    id: str
    name: str
    number: str


class ErrorOut(BaseModel):
    error: str


class ContactDraft(BaseModel):
    """A contact that has not been assigned an id yet."""

    name: str = Field(..., min_length=NAME_MIN_LENGTH)
    number: str = Field(..., min_length=1)


def validate_draft(name, number) -> ContactDraft | ValidationFailed:
    """Check `name`/`number` against `ContactDraft`.

    Returns:
        ContactDraft | ValidationFailed: The draft, or the per-field reasons it
        was rejected.
    """
    try:
        return ContactDraft(name=name, number=number)
    except ValidationError as exc:
        errors = {}
        for err in exc.errors():
            errors[str(err["loc"][0])] = err["msg"]
        return ValidationFailed(errors=errors)
