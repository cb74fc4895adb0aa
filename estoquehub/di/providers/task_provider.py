from typing import TYPE_CHECKING
from ...domain.repositories.task_repository import TaskRepository
from ...application.use_cases.task import CreateTaskUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class TaskProvider:
    """Legacy task use case provider"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            CreateTaskUseCase,
            lambda: CreateTaskUseCase(task_repository=container.get(TaskRepository))
        )
