# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.task_repository import TaskRepository
from ....domain.models.task import Task
from ...dto.task_dto import TaskCreateRequest, TaskResponse


class CreateTaskUseCase:
    """Use case for the legacy task insert. No validation beyond the schema."""
    
    def __init__(self, task_repository: TaskRepository) -> None:
        self.task_repository = task_repository
    
    async def execute(self, request: TaskCreateRequest) -> List[TaskResponse]:
        saved = await self.task_repository.create(
            Task(
                id=None,
                titulo=request.titulo,
                descricao=request.descricao,
                usuario_id=request.usuario_id,
            )
        )
        # Legacy clients expect the inserted rows as a list
        return [
            TaskResponse(
                id=saved.id or 0,
                titulo=saved.titulo,
                descricao=saved.descricao,
                usuario_id=saved.usuario_id,
            )
        ]
