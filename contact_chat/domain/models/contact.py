from dataclasses import dataclass


@dataclass(frozen=True)
class ContactSummary:
    """Projection of a contact's user record: only name and surname are exposed"""
    name: str
    surname: str
