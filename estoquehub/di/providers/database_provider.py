from typing import TYPE_CHECKING
from ...core.config import Settings
from ...infrastructure.db.connection import create_db_engine, create_session_factory

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the engine and the session factory in the container.
        This is the ONLY place where database connections are created.
        """
        settings: Settings = container.get(Settings)
        engine = create_db_engine(settings.database_url)
        
        container.register_singleton("engine", engine)
        container.register_singleton("session_factory", create_session_factory(engine))
