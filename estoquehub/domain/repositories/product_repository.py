from abc import ABC, abstractmethod
from typing import Optional, List
from ..models.product import Product


class ProductRepository(ABC):
    """Repository interface - defines contract for product data access.
    
    Every method is scoped to an owner: rows of other users are never
    read or written.
    """
    
    @abstractmethod
    async def find_by_owner(self, user_id: int) -> List[Product]:
        """Find all products owned by a user, newest first"""
        pass
    
    @abstractmethod
    async def find_by_sku(self, user_id: int, sku: str) -> Optional[Product]:
        """Find the user's product carrying the given SKU"""
        pass
    
    @abstractmethod
    async def create(self, product: Product) -> Product:
        """Insert a product and return it with ID and timestamps set"""
        pass
    
    @abstractmethod
    async def update(self, product: Product) -> Optional[Product]:
        """Update the row matching product.id and product.user_id.
        
        Returns None when no row matched.
        """
        pass
    
    @abstractmethod
    async def delete(self, product_id: int, user_id: int) -> None:
        """Delete the row matching both IDs (no-op when nothing matches)"""
        pass
