from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from decimal import Decimal
from typing import Optional


class ProductPayload(BaseModel):
    """
    Request body for creating or replacing a product.

    Every field is optional at the schema level so that presence can be
    checked by the route. Fields left out of a PUT body are written as NULL.
    """
    name: Optional[str] = Field(None, description="Product name")
    category: Optional[str] = Field(None, description="Product category")
    quantity: Optional[int] = Field(None, description="Units in stock")
    price: Optional[Decimal] = Field(None, description="Unit price")
    description: Optional[str] = Field(None, description="Free text description")

    def has_required_fields(self) -> bool:
        """
        Name and category must be non-empty; quantity and price must be
        present in the body, even if null.
        """
        return (
            bool(self.name)
            and bool(self.category)
            and "quantity" in self.model_fields_set
            and "price" in self.model_fields_set
        )


class ProductResponse(BaseModel):
    """Schema for product response including all fields."""
    id: int
    name: str
    category: str
    quantity: int
    price: Decimal
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ProductCreatedResponse(BaseModel):
    """Schema returned after a product is created."""
    id: int
    message: str


class MessageResponse(BaseModel):
    """Schema for confirmation messages."""
    message: str


class ProductStats(BaseModel):
    """Aggregate values over the whole products table."""
    total_products: int
    total_items: Optional[int] = None
    categories: int
    total_value: Optional[Decimal] = None


class ErrorResponse(BaseModel):
    """Error envelope used by every failure response."""
    error: str
