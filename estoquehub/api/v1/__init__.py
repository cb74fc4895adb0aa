from .auth_controller import router as auth_router
from .product_controller import router as product_router
from .task_controller import router as task_router


__all__ = ["auth_router", "product_router", "task_router"]
