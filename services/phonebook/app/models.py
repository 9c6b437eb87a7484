"""Domain types for the phonebook.

`Contact` is the persisted record. The remaining classes are the outcomes a
store operation can return besides a contact; the router maps each of them to
an HTTP response.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Contact:
    id: str
    name: str
    number: str

    def to_dict(self) -> dict:
        """Serialize as the `{id, name, number}` JSON object clients receive."""
        return {"id": self.id, "name": self.name, "number": self.number}


@dataclass(frozen=True)
class NotFound:
    """No record has the requested id."""

    id: str


@dataclass(frozen=True)
class Deleted:
    id: str


@dataclass(frozen=True)
class ValidationFailed:
    """A draft was rejected before anything was written.

    `errors` maps field name to a human readable reason.
    """

    errors: dict[str, str] = field(default_factory=dict)
