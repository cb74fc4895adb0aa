# Standard library imports
import logging
from typing import Any

# Local application imports
from ....core.exceptions import ConflictError, DependencyError
from ....domain.repositories.product_repository import ProductRepository
from ....domain.models.product import Product
from ...dto.product_dto import ProductRequest, ProductResponse, to_product_response
from .validation import parse_product_id, resolve_product_fields

logger = logging.getLogger(__name__)


class UpdateProductUseCase:
    """Use case for replacing the fields of one of the caller's products"""
    
    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository
    
    async def execute(
        self,
        product_id: Any,
        request: ProductRequest,
        user_id: int,
    ) -> ProductResponse:
        """
        Update a product
        
        Args:
            product_id: Raw ID from the request path
            request: Product body (same shape as create)
            user_id: ID of the authenticated user
            
        Returns:
            ProductResponse with the updated product
            
        Raises:
            ValidationError: If the ID is invalid, name/sku is missing or a
                quantity is negative
            ConflictError: If another product of the user already uses the SKU
            DependencyError: If no product with this ID belongs to the user
        """
        parsed_id = parse_product_id(product_id)
        name, sku, quantity, min_quantity, category = resolve_product_fields(request)
        
        existing = await self.product_repository.find_by_sku(user_id, sku)
        if existing is not None and existing.id != parsed_id:
            raise ConflictError("Another product already uses this SKU.")
        
        updated = await self.product_repository.update(
            Product(
                id=parsed_id,
                user_id=user_id,
                name=name,
                sku=sku,
                quantity=quantity,
                min_quantity=min_quantity,
                category=category,
            )
        )
        if updated is None:
            # Single-row update returned nothing: not found and not owned look the same
            raise DependencyError(
                f"Product {parsed_id} not updated for user {user_id}: no matching row",
                operation="update_product",
                user_message="Error updating product.",
            )
        
        logger.info(f"User {user_id} updated product {parsed_id}")
        return to_product_response(updated)
