from abc import ABC, abstractmethod
from typing import Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by exact (case-sensitive) email address"""
        pass
    
    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new user and return it with its ID set"""
        pass
