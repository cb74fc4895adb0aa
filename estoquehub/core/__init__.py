from .config import Settings, get_settings
from .exceptions import (
    EstoqueHubError,
    ValidationError,
    ConflictError,
    AuthError,
    TokenError,
    InvalidCredentialsError,
    DependencyError,
    get_user_message,
)
from .security import (
    hash_password,
    verify_password,
    create_jwt_token,
    decode_jwt_token,
)

__all__ = [
    "Settings",
    "get_settings",
    "EstoqueHubError",
    "ValidationError",
    "ConflictError",
    "AuthError",
    "TokenError",
    "InvalidCredentialsError",
    "DependencyError",
    "get_user_message",
    "hash_password",
    "verify_password",
    "create_jwt_token",
    "decode_jwt_token",
]
