"""Category validation domain service."""

from household_ledger.domain.exceptions import InvalidCategoryException
from household_ledger.domain.specifications import (
    can_be_used_with_transaction_type,
    has_valid_category_description,
    is_valid_purpose,
)


class CategoryValidationService:
    """
    Stateless rules about categories that callers need before touching
    an aggregate, e.g. whether a stored category accepts a transaction type.
    """

    def validate_category_creation(self, description, purpose) -> None:
        """
        Raises:
            InvalidCategoryException: If the description or purpose is invalid
        """
        if not has_valid_category_description(description):
            raise InvalidCategoryException("invalid category description")
        if not is_valid_purpose(purpose):
            raise InvalidCategoryException("invalid category purpose")

    def supports_transaction_type(self, purpose, transaction_type) -> bool:
        return can_be_used_with_transaction_type(purpose, transaction_type)
