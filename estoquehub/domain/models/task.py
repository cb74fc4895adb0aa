from dataclasses import dataclass
from typing import Optional


@dataclass
class Task:
    """Legacy task ("tarefa") record. Not linked to products or users."""
    id: Optional[int]
    titulo: Optional[str]
    descricao: Optional[str] = None
    usuario_id: Optional[int] = None
