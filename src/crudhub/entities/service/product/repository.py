from sqlmodel import Session, select

from .entity import Product
from .table import ProductTable


class ProductRepository:
    """Data-access layer for products."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, product_id: str) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def list_all(self, offset: int = 0, limit: int | None = None) -> list[Product]:
        """Return products in creation order."""
        statement = (
            select(ProductTable)
            .order_by(ProductTable.created_at, ProductTable.id)
            .offset(offset)
        )
        if limit is not None:
            statement = statement.limit(limit)
        rows = self._session.exec(statement).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def create(self, product: Product) -> Product:
        row = ProductTable.model_validate(product.model_dump())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)
