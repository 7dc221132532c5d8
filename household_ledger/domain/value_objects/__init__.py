"""Value Objects - self-validating scalars without identity."""

from .age import AGE_OF_MAJORITY, Age
from .category_description import MAX_DESCRIPTION_LENGTH, CategoryDescription
from .money import Money, to_decimal
from .person_name import MAX_NAME_LENGTH, PersonName

__all__ = [
    "Age",
    "AGE_OF_MAJORITY",
    "CategoryDescription",
    "MAX_DESCRIPTION_LENGTH",
    "Money",
    "to_decimal",
    "PersonName",
    "MAX_NAME_LENGTH",
]
