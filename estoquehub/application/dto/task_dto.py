from typing import Optional

from pydantic import BaseModel


class TaskCreateRequest(BaseModel):
    """DTO for the legacy task creation request (Portuguese field names)"""
    titulo: Optional[str] = None
    descricao: Optional[str] = None
    usuario_id: Optional[int] = None


class TaskResponse(BaseModel):
    """DTO for a stored legacy task"""
    id: int
    titulo: Optional[str] = None
    descricao: Optional[str] = None
    usuario_id: Optional[int] = None
