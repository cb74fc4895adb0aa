# Standard library imports
from pathlib import Path
from typing import Optional
import logging

# External package imports
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

# Local application imports
from .api.error_handlers import register_exception_handlers
from .api.v1 import auth_router, product_router, task_router
from .core.config import Settings, get_settings
from .di.container import DIContainer
from .infrastructure.db.connection import init_db

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Logging configuration
    - The DI container (database, repositories, use cases)
    - CORS middleware configuration
    - Centralized error handling
    - API route registration and the browser client
    
    Args:
        settings: Settings to use; defaults to the environment
        
    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)
    
    container = DIContainer(settings)
    
    # Do not block startup if the database is unreachable; requests will fail with 500
    try:
        init_db(container.get("engine"))
    except SQLAlchemyError as e:
        logger.error(f"Error creating tables at startup: {e}", exc_info=True)
    
    application = FastAPI(
        title="EstoqueHub API",
        version="1.0.0",
        description="Inventory management: user accounts and per-user products",
    )
    application.state.container = container
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_exception_handlers(application)
    
    @application.get("/", tags=["health"])
    async def health():
        return {"message": "API online"}
    
    # Register API routers
    application.include_router(auth_router, prefix="/auth")
    application.include_router(product_router, prefix="/products")
    application.include_router(task_router, prefix="/tarefas")
    
    application.mount("/app", StaticFiles(directory=STATIC_DIR, html=True), name="client")
    
    logger.info(f"EstoqueHub ready (CORS origins: {settings.cors_origins})")
    return application


# Create application instance
app = create_application()
