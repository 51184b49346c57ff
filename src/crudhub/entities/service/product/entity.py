"""Entity: Product."""

from typing import Any

from pydantic import BaseModel, Field

from src.crudhub.entities.core._base import Entity


class Product(Entity):
    """A catalog item offered by the storefront."""

    name: str = Field(description="Display name")
    price: float = Field(ge=0, description="Unit price")
    description: str = Field(default="", description="Free-form description")

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.price == other.price
            and self.description == other.description
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.price, self.description))


class ProductCreate(BaseModel):
    """Request body for creating a product. Presence is checked by the service."""

    name: str | None = None
    price: float | None = None
    description: str | None = None
