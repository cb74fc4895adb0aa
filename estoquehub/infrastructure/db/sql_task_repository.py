# Local application imports
from ...domain.repositories.task_repository import TaskRepository
from ...domain.models.task import Task
from .base_repository import SqlRepository
from .tables import TaskRow


class SqlTaskRepository(SqlRepository, TaskRepository):
    """SQLAlchemy implementation of the legacy TaskRepository"""
    
    async def create(self, task: Task) -> Task:
        return await self._run("insert_task", "Error creating task.", self._insert, task)
    
    def _insert(self, task: Task) -> Task:
        with self.session_factory() as session:
            row = TaskRow(
                titulo=task.titulo,
                descricao=task.descricao,
                usuario_id=task.usuario_id,
            )
            session.add(row)
            session.commit()
            session.refresh(row)
            return Task(
                id=row.id,
                titulo=row.titulo,
                descricao=row.descricao,
                usuario_id=row.usuario_id,
            )
