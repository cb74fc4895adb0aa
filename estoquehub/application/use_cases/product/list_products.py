# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.product_repository import ProductRepository
from ...dto.product_dto import ProductResponse, to_product_response


class ListProductsUseCase:
    """Use case for listing the caller's products"""
    
    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository
    
    async def execute(self, user_id: int) -> List[ProductResponse]:
        """
        List all products owned by a user, newest first
        
        Args:
            user_id: ID of the authenticated user
            
        Returns:
            List of ProductResponse objects
        """
        products = await self.product_repository.find_by_owner(user_id)
        return [to_product_response(product) for product in products]
