from loguru import logger
from sqlmodel import Session

from src.crudhub.core.errors import NotFound
from src.crudhub.core.services.validation import check_page, check_price, require_fields
from src.crudhub.entities.service.product import (
    Product,
    ProductCreate,
    ProductRepository,
)


class ProductService:
    """Listing, lookup and creation of catalog products."""

    def __init__(self, db_session: Session):
        self._db_session = db_session
        self._repo = ProductRepository(db_session)

    def list_products(self, offset: int = 0, limit: int | None = None) -> list[Product]:
        check_page(offset, limit)
        return self._repo.list_all(offset=offset, limit=limit)

    def get_product(self, product_id: str) -> Product:
        product = self._repo.get(product_id)
        if product is None:
            raise NotFound("Product", product_id)
        return product

    def create_product(self, data: ProductCreate) -> Product:
        require_fields(name=data.name, price=data.price)
        check_price(data.price)

        product = Product(
            name=data.name,
            price=data.price,
            description=data.description or "",
        )
        created = self._repo.create(product)
        self._db_session.commit()
        logger.info("Created product {}", created.id)
        return created
