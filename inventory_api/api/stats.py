from fastapi import APIRouter, Depends

from inventory_api.api.products import get_product_service
from inventory_api.schemas.product import ProductStats
from inventory_api.services.product_service import ProductService

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get(
    "",
    response_model=ProductStats,
    summary="Inventory statistics",
    description="Product count, total units, distinct categories and total stock value."
)
def get_stats(service: ProductService = Depends(get_product_service)):
    return service.get_stats()
