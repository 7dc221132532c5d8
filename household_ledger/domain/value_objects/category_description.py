"""CategoryDescription value object."""

from dataclasses import dataclass

from household_ledger.domain.exceptions import InvalidValueObjectError

MAX_DESCRIPTION_LENGTH = 400


@dataclass(frozen=True)
class CategoryDescription:
    """Non-blank category description of at most 400 characters, stored trimmed."""

    value: str

    @classmethod
    def create(cls, value: str) -> "CategoryDescription":
        if not isinstance(value, str) or not value.strip():
            raise InvalidValueObjectError("description is required", field="description")
        if len(value) > MAX_DESCRIPTION_LENGTH:
            raise InvalidValueObjectError(
                f"description cannot exceed {MAX_DESCRIPTION_LENGTH} characters",
                field="description",
            )
        return cls(value=value.strip())

    def __str__(self) -> str:
        return self.value
