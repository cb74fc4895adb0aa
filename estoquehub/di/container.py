# Local application imports
from ..core.config import Settings
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    ProductProvider,
    RepositoryProvider,
    TaskProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Settings and database handles (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Use cases (AuthProvider, ProductProvider, TaskProvider) - depend on repositories
    
    One container is built per application (see main.create_application)
    and kept on app.state, so tests can build isolated applications.
    """
    
    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self.settings = settings
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases
        """
        self.register_singleton(Settings, self.settings)
        
        # Step 1: Register database connections (foundation)
        DatabaseProvider.register(self)
        
        # Step 2: Register repositories (depends on database)
        RepositoryProvider.register(self)
        
        # Step 3: Register use cases (depends on repositories)
        AuthProvider.register(self)
        ProductProvider.register(self)
        TaskProvider.register(self)
