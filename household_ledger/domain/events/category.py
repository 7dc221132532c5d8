"""Category domain events."""

from dataclasses import dataclass

from .base import DomainEvent


@dataclass(frozen=True)
class CategoryCreated(DomainEvent):
    """Raised when a new category is registered."""

    category_id: int
    description: str
    purpose: str

    def to_dict(self) -> dict:
        return {
            **super().to_dict(),
            "category_id": self.category_id,
            "description": self.description,
            "purpose": self.purpose,
        }
