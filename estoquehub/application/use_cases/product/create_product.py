# Standard library imports
import logging

# Local application imports
from ....core.exceptions import ConflictError
from ....domain.repositories.product_repository import ProductRepository
from ....domain.models.product import Product
from ...dto.product_dto import ProductRequest, ProductResponse, to_product_response
from .validation import resolve_product_fields

logger = logging.getLogger(__name__)


class CreateProductUseCase:
    """Use case for creating a product owned by the caller"""
    
    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository
    
    async def execute(self, request: ProductRequest, user_id: int) -> ProductResponse:
        """
        Create a new product
        
        Args:
            request: Product body (name, sku, quantity, minQuantity, category)
            user_id: ID of the authenticated user
            
        Returns:
            ProductResponse with the stored product
            
        Raises:
            ValidationError: If name/sku is missing or a quantity is negative
            ConflictError: If the user already has a product with this SKU
        """
        name, sku, quantity, min_quantity, category = resolve_product_fields(request)
        
        existing = await self.product_repository.find_by_sku(user_id, sku)
        if existing is not None:
            raise ConflictError("A product with this SKU already exists.")
        
        # The (user_id, sku) unique constraint still guards concurrent inserts
        saved = await self.product_repository.create(
            Product(
                id=None,
                user_id=user_id,
                name=name,
                sku=sku,
                quantity=quantity,
                min_quantity=min_quantity,
                category=category,
            )
        )
        logger.info(f"User {user_id} created product {saved.id}")
        
        return to_product_response(saved)
