from .auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse
from .user_dto import UserSummary, CurrentUser
from .product_dto import (
    ProductRequest,
    ProductResponse,
    MessageResponse,
    to_product_response,
)
from .task_dto import TaskCreateRequest, TaskResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "AuthResponse",
    "UserSummary",
    "CurrentUser",
    "ProductRequest",
    "ProductResponse",
    "MessageResponse",
    "to_product_response",
    "TaskCreateRequest",
    "TaskResponse",
]
