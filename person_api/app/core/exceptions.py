"""
Error types raised by the service layer.

Services raise these; the API routers translate them into HTTP
responses (404 and 400 respectively).
"""

from typing import Optional


class PersonNotFoundError(LookupError):
    """No person matched the request.

    ``person_id`` is ``None`` when the store as a whole is empty.
    """

    def __init__(self, person_id: Optional[int] = None) -> None:
        if person_id is None:
            message = "No persons found"
        else:
            message = f"Person {person_id} not found"
        super().__init__(message)
        self.person_id = person_id


class PersonValidationError(ValueError):
    """A payload or query argument failed validation."""
