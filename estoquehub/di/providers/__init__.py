from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .product_provider import ProductProvider
from .task_provider import TaskProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "AuthProvider",
    "ProductProvider",
    "TaskProvider",
]
