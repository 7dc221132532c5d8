"""Person-related domain exceptions."""

from .base import DomainException


class InvalidPersonException(DomainException):
    """Raised when a person violates a business rule."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_PERSON",
        )


class PersonNotFoundException(DomainException):
    """Raised when a person cannot be found."""

    def __init__(self, person_id: int):
        super().__init__(
            message=f"Person not found: {person_id}",
            code="PERSON_NOT_FOUND",
        )
        self.person_id = person_id
