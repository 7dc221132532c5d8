"""Age value object."""

from dataclasses import dataclass

from household_ledger.domain.exceptions import InvalidValueObjectError

MINIMUM_AGE = 0
MAXIMUM_AGE = 150
AGE_OF_MAJORITY = 18


@dataclass(frozen=True)
class Age:
    """A person's age in whole years, between 0 and 150."""

    value: int

    @classmethod
    def create(cls, value: int) -> "Age":
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidValueObjectError(
                f"age must be a whole number, got {value!r}", field="age"
            )
        if value < MINIMUM_AGE or value > MAXIMUM_AGE:
            raise InvalidValueObjectError(
                f"age must be between {MINIMUM_AGE} and {MAXIMUM_AGE}", field="age"
            )
        return cls(value=value)

    @property
    def is_minor(self) -> bool:
        return self.value < AGE_OF_MAJORITY

    @property
    def is_adult(self) -> bool:
        return self.value >= AGE_OF_MAJORITY

    def __str__(self) -> str:
        return f"{self.value} years"
