# Standard library imports
import asyncio
import logging
from typing import Any, Callable, Optional, TypeVar

# External package imports
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

# Local application imports
from ...core.exceptions import ConflictError, DependencyError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlRepository:
    """
    Shared plumbing for SQLAlchemy repositories.
    
    Sessions are synchronous; each call runs in a worker thread so the event
    loop is never blocked. Database failures are translated into the
    application's error types here and nowhere else.
    """
    
    def __init__(self, session_factory: sessionmaker) -> None:
        self.session_factory = session_factory
    
    async def _run(
        self,
        operation: str,
        user_message: str,
        work: Callable[..., T],
        *args: Any,
        conflict_message: Optional[str] = None,
    ) -> T:
        """
        Run blocking session work off the event loop
        
        Args:
            operation: Short operation name used in logs
            user_message: Safe message reported to the client on failure
            work: Synchronous function doing the session work
            conflict_message: If set, unique-constraint violations raise
                ConflictError with this message instead of DependencyError
                
        Raises:
            ConflictError: On unique-constraint violation when requested
            DependencyError: On any other database failure
        """
        try:
            return await asyncio.to_thread(work, *args)
        except IntegrityError as e:
            if conflict_message is not None:
                logger.warning(f"Unique constraint hit during {operation}: {e.orig}")
                raise ConflictError(conflict_message) from e
            logger.error(f"Integrity error during {operation}: {e}", exc_info=True)
            raise DependencyError(
                f"Integrity error during {operation}: {e}",
                operation=operation,
                user_message=user_message,
            ) from e
        except SQLAlchemyError as e:
            logger.error(f"Database error during {operation}: {e}", exc_info=True)
            raise DependencyError(
                f"Database error during {operation}: {e}",
                operation=operation,
                user_message=user_message,
            ) from e
