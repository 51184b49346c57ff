"""Product catalog router."""

from fastapi import APIRouter, Depends, Query

from src.crudhub.api.http.deps import get_product_service
from src.crudhub.core.services import ProductService
from src.crudhub.entities.service.product import Product, ProductCreate

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=list[Product])
def list_products(
    offset: int = Query(default=0),
    limit: int | None = Query(default=None),
    service: ProductService = Depends(get_product_service),
) -> list[Product]:
    """List products in creation order."""
    return service.list_products(offset=offset, limit=limit)


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> Product:
    return service.get_product(product_id)


@router.post("", response_model=Product, status_code=201)
def create_product(
    data: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> Product:
    return service.create_product(data)
