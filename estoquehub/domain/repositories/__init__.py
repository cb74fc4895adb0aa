from .user_repository import UserRepository
from .product_repository import ProductRepository
from .task_repository import TaskRepository

__all__ = ["UserRepository", "ProductRepository", "TaskRepository"]
