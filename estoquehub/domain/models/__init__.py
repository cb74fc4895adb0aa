from .user import User
from .product import Product
from .task import Task

__all__ = ["User", "Product", "Task"]
