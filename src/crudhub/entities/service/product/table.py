"""Product database table model."""

from src.crudhub.entities.core._base import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products."""

    __tablename__ = "products"

    name: str
    price: float
    description: str = ""
