from .create_task import CreateTaskUseCase

__all__ = ["CreateTaskUseCase"]
