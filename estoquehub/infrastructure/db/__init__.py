from .connection import create_db_engine, create_session_factory, init_db
from .tables import Base, UserRow, ProductRow, TaskRow
from .sql_user_repository import SqlUserRepository
from .sql_product_repository import SqlProductRepository
from .sql_task_repository import SqlTaskRepository

__all__ = [
    "create_db_engine",
    "create_session_factory",
    "init_db",
    "Base",
    "UserRow",
    "ProductRow",
    "TaskRow",
    "SqlUserRepository",
    "SqlProductRepository",
    "SqlTaskRepository",
]
