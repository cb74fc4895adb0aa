from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.product_repository import ProductRepository
from ...domain.repositories.task_repository import TaskRepository
from ...infrastructure.db.sql_user_repository import SqlUserRepository
from ...infrastructure.db.sql_product_repository import SqlProductRepository
from ...infrastructure.db.sql_task_repository import SqlTaskRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets the session factory from database provider and creates repository instances.
        """
        session_factory = container.get("session_factory")
        
        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            UserRepository,
            SqlUserRepository(session_factory=session_factory)
        )
        
        container.register_singleton(
            ProductRepository,
            SqlProductRepository(session_factory=session_factory)
        )
        
        container.register_singleton(
            TaskRepository,
            SqlTaskRepository(session_factory=session_factory)
        )
