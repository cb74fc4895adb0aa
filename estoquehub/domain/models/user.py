from dataclasses import dataclass
from typing import Optional

from ...core.exceptions import ValidationError


MIN_NAME_LENGTH = 3


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[int]
    name: str
    email: str
    password_hash: str

    def __post_init__(self):
        """Business validations"""
        if not self.name or len(self.name) < MIN_NAME_LENGTH:
            raise ValidationError(f"Name must be at least {MIN_NAME_LENGTH} characters.")
        if not self.email:
            raise ValidationError("Email is required.")
        if not self.password_hash:
            raise ValidationError("Password hash is required.")
