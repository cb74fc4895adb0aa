# Standard library imports
import logging
from typing import Any

# Local application imports
from ....domain.repositories.product_repository import ProductRepository
from ...dto.product_dto import MessageResponse
from .validation import parse_product_id

logger = logging.getLogger(__name__)


class DeleteProductUseCase:
    """Use case for deleting one of the caller's products"""
    
    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository
    
    async def execute(self, product_id: Any, user_id: int) -> MessageResponse:
        """
        Delete a product. Deleting an unknown or foreign ID is a silent no-op.
        
        Raises:
            ValidationError: If the ID is invalid
        """
        parsed_id = parse_product_id(product_id)
        await self.product_repository.delete(parsed_id, user_id)
        logger.info(f"User {user_id} deleted product {parsed_id}")
        return MessageResponse(message="Product removed successfully.")
