from abc import ABC, abstractmethod
from ..models.task import Task


class TaskRepository(ABC):
    """Repository interface for the legacy tasks table"""
    
    @abstractmethod
    async def create(self, task: Task) -> Task:
        """Insert a task and return it with its ID set"""
        pass
