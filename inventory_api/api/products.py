from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import Optional

from inventory_api.database import get_db
from inventory_api.services.product_service import ProductService
from inventory_api.schemas.product import (
    ProductPayload,
    ProductResponse,
    ProductCreatedResponse,
    MessageResponse,
    ErrorResponse,
)

router = APIRouter(prefix="/products", tags=["Products"])

NOT_FOUND_MESSAGE = "Product not found"


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """Dependency providing a ProductService bound to the request session."""
    return ProductService(db)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)


@router.get(
    "",
    response_model=list[ProductResponse],
    summary="List all products",
    description="Get every product, most recently created first."
)
def list_products(service: ProductService = Depends(get_product_service)):
    """Get all products."""
    return service.list_all()


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get product by ID",
)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """Get a product by ID."""
    product = service.get_by_id(product_id)

    if not product:
        raise _not_found()

    return product


@router.post(
    "",
    response_model=ProductCreatedResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Create a new product",
    description="Create a product. name, category, quantity and price are required."
)
def create_product(
    product_data: Optional[ProductPayload] = None,
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product.

    - **name**: Product name (required, non-empty)
    - **category**: Product category (required, non-empty)
    - **quantity**: Units in stock (required)
    - **price**: Unit price (required)
    - **description**: Free text (optional)
    """
    if product_data is None:
        product_data = ProductPayload()
    if not product_data.has_required_fields():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields"
        )

    product_id = service.create(product_data)
    return ProductCreatedResponse(id=product_id, message="Product created successfully")


@router.put(
    "/{product_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Replace a product",
    description="Rewrite every field of a product. Omitted fields are stored as null."
)
def update_product(
    product_id: int,
    product_data: Optional[ProductPayload] = None,
    service: ProductService = Depends(get_product_service)
):
    """Update a product."""
    if product_data is None:
        product_data = ProductPayload()
    if service.update(product_id, product_data) == 0:
        raise _not_found()

    return MessageResponse(message="Product updated successfully")


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Delete a product",
)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """Delete a product."""
    if service.delete(product_id) == 0:
        raise _not_found()

    return MessageResponse(message="Product deleted successfully")
