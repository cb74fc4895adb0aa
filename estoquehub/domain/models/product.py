# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

# Local application imports
from ...core.exceptions import ValidationError


@dataclass
class Product:
    """
    Pure domain model for Product entity - no external dependencies.
    
    Every product belongs to exactly one user. The SKU is unique within
    that user's products; quantities are never negative.
    """
    id: Optional[int]
    user_id: int
    name: str
    sku: str
    quantity: int = 0
    min_quantity: int = 0
    category: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    
    def __post_init__(self) -> None:
        """Business validations"""
        if not self.user_id:
            raise ValidationError("Owner user ID is required.")
        if not self.name or not self.sku:
            raise ValidationError("Name and SKU are required.")
        if self.quantity < 0 or self.min_quantity < 0:
            raise ValidationError("Quantity and minimum stock cannot be negative.")
