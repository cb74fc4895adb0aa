# Standard library imports
from typing import Any, Callable, Dict, Hashable


class BaseContainer:
    """
    Minimal dependency injection container.
    
    Keys are usually classes (interfaces or use cases) but plain strings are
    accepted for infrastructure handles such as the engine.
    - Singletons are stored instances, returned as-is.
    - Factories build a fresh instance on every get().
    """
    
    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}
    
    def register_singleton(self, key: Hashable, instance: Any) -> None:
        """Register an already built instance"""
        self._singletons[key] = instance
    
    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        """Register a zero-argument callable building a new instance per get()"""
        self._factories[key] = factory
    
    def get(self, key: Hashable) -> Any:
        """
        Resolve a dependency
        
        Raises:
            KeyError: If nothing is registered under the key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        raise KeyError(f"No dependency registered for {key!r}")
