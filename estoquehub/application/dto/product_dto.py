# Standard library imports
from datetime import datetime
from typing import Optional

# External package imports
from pydantic import BaseModel, ConfigDict, Field

# Local application imports
from ...domain.models.product import Product


class ProductRequest(BaseModel):
    """DTO for product create/update request (same body for both)"""
    model_config = ConfigDict(populate_by_name=True)
    
    name: Optional[str] = None
    sku: Optional[str] = None
    quantity: Optional[int] = None
    min_quantity: Optional[int] = Field(default=None, alias="minQuantity")
    category: Optional[str] = None


class ProductResponse(BaseModel):
    """DTO for product response, using API naming (camelCase)"""
    model_config = ConfigDict(populate_by_name=True)
    
    id: int
    name: str
    sku: str
    quantity: int
    min_quantity: int = Field(alias="minQuantity")
    category: Optional[str] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    last_updated: Optional[datetime] = Field(default=None, alias="lastUpdated")


class MessageResponse(BaseModel):
    """DTO for plain confirmation messages"""
    message: str


def to_product_response(product: Product) -> ProductResponse:
    """Map a stored product (storage naming) to the API response shape"""
    return ProductResponse(
        id=product.id or 0,
        name=product.name,
        sku=product.sku,
        quantity=product.quantity,
        min_quantity=product.min_quantity,
        category=product.category,
        created_at=product.created_at,
        last_updated=product.updated_at,
    )
