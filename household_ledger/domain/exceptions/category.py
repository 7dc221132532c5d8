"""Category-related domain exceptions."""

from .base import DomainException


class InvalidCategoryException(DomainException):
    """Raised when a category violates a business rule."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_CATEGORY",
        )


class CategoryNotFoundException(DomainException):
    """Raised when a category cannot be found."""

    def __init__(self, category_id: int):
        super().__init__(
            message=f"Category not found: {category_id}",
            code="CATEGORY_NOT_FOUND",
        )
        self.category_id = category_id
