"""Transaction validation domain service."""

from household_ledger.domain.specifications import (
    enforce_transaction_rules,
    ensure_category_supports_type,
    ensure_minor_may_register,
)


class TransactionValidationService:
    """
    Authorizes transaction creation from raw values plus facts the caller
    looked up (is the person a minor, does the category accept the type).

    Pure business logic: no persistence, no side effects. Uses the same
    rule gate as ``Transaction.create``, minus the description rule.
    """

    def validate_transaction_creation(
        self,
        amount,
        transaction_type,
        category_id: int,
        person_id: int,
        is_person_minor: bool,
        category_supports_type: bool,
    ) -> None:
        """
        Validate that a transaction may be created.

        Raises:
            InvalidTransactionException: On the first violated rule
        """
        enforce_transaction_rules(
            amount=amount,
            transaction_type=transaction_type,
            is_person_minor=is_person_minor,
            category_supports_type=category_supports_type,
            require_description=False,
        )

    def validate_business_rules(
        self,
        is_person_minor: bool,
        transaction_type,
        category_compatible: bool,
    ) -> None:
        """Check only the rules that span person, category and transaction."""
        ensure_minor_may_register(is_person_minor, transaction_type)
        ensure_category_supports_type(category_compatible)
