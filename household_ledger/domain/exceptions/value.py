"""Errors raised while constructing value objects."""


class InvalidValueObjectError(ValueError):
    """
    Raised when a raw scalar cannot become a value object.

    This is a lower-level argument error, not a domain exception:
    aggregate factories catch it and re-raise their own exception type.
    """

    def __init__(self, message: str, field: str):
        self.message = message
        self.field = field
        super().__init__(message)


class CurrencyMismatchError(InvalidValueObjectError):
    """Raised when combining amounts expressed in different currencies."""

    def __init__(self, left: str, right: str):
        super().__init__(
            f"cannot combine amounts in different currencies: {left} and {right}",
            field="currency",
        )
        self.left = left
        self.right = right
