"""PersonName value object."""

from dataclasses import dataclass

from household_ledger.domain.exceptions import InvalidValueObjectError

MAX_NAME_LENGTH = 200


@dataclass(frozen=True)
class PersonName:
    """Non-blank person name of at most 200 characters, stored trimmed."""

    value: str

    @classmethod
    def create(cls, value: str) -> "PersonName":
        if not isinstance(value, str) or not value.strip():
            raise InvalidValueObjectError("name is required", field="name")
        if len(value) > MAX_NAME_LENGTH:
            raise InvalidValueObjectError(
                f"name cannot exceed {MAX_NAME_LENGTH} characters", field="name"
            )
        return cls(value=value.strip())

    def __str__(self) -> str:
        return self.value
