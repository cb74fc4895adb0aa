"""Input checks shared by the product create/update use cases."""

# Standard library imports
from typing import Any, Optional, Tuple

# Local application imports
from ....core.exceptions import ValidationError
from ...dto.product_dto import ProductRequest

# Largest value a signed 64-bit INTEGER column can hold
MAX_PRODUCT_ID = 2**63 - 1


def parse_product_id(raw_id: Any) -> int:
    """
    Parse a path ID into a positive integer that fits an INTEGER column
    
    Raises:
        ValidationError: If the value is not an integer in 1..MAX_PRODUCT_ID
    """
    try:
        product_id = int(str(raw_id).strip())
    except (TypeError, ValueError):
        raise ValidationError("Invalid ID.")
    if product_id <= 0 or product_id > MAX_PRODUCT_ID:
        raise ValidationError("Invalid ID.")
    return product_id


def resolve_product_fields(
    request: ProductRequest,
) -> Tuple[str, str, int, int, Optional[str]]:
    """
    Apply defaults and range checks to a product body
    
    Missing quantities default to 0 and a falsy category is stored as None.
    
    Returns:
        (name, sku, quantity, min_quantity, category)
        
    Raises:
        ValidationError: If name/sku is missing or a quantity is negative
    """
    if not request.name or not request.sku:
        raise ValidationError("Name and SKU are required.")
    
    quantity = request.quantity if request.quantity is not None else 0
    min_quantity = request.min_quantity if request.min_quantity is not None else 0
    
    if quantity < 0 or min_quantity < 0:
        raise ValidationError("Quantity and minimum stock cannot be negative.")
    
    return request.name, request.sku, quantity, min_quantity, request.category or None
