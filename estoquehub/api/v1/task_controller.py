# Standard library imports
import logging
from typing import Callable, List, Union

# External package imports
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

# Local application imports
from ...application.dto.task_dto import TaskCreateRequest, TaskResponse
from ...application.use_cases.task import CreateTaskUseCase
from ...core.exceptions import EstoqueHubError, get_user_message
from ...di.container import DIContainer
from ..error_handlers import describe_validation_errors
from .dependencies import get_container

logger = logging.getLogger(__name__)


class LegacyErrorRoute(APIRoute):
    """Route that reports body validation failures as {"error": ...}"""

    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()

        async def route_handler(request: Request) -> Response:
            try:
                return await original_route_handler(request)
            except RequestValidationError as exception:
                logger.warning(f"Legacy task request rejected: {exception.errors()}")
                return JSONResponse(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    content={"error": describe_validation_errors(exception)},
                )

        return route_handler


router = APIRouter(tags=["legacy"], route_class=LegacyErrorRoute)


@router.post(
    "",
    response_model=List[TaskResponse],
    status_code=status.HTTP_201_CREATED,
    deprecated=True,
)
async def create_task(
    request: TaskCreateRequest,
    container: DIContainer = Depends(get_container),
) -> Union[List[TaskResponse], JSONResponse]:
    """
    Create a legacy task ("tarefa").
    
    Kept for old clients only. Unauthenticated, and errors are reported as
    {"error": ...} with status 400 instead of the usual {"message": ...}.
    """
    create_task_use_case = container.get(CreateTaskUseCase)
    try:
        return await create_task_use_case.execute(request)
    except EstoqueHubError as exception:
        logger.warning(f"Legacy task insert failed: {exception.message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": get_user_message(exception)},
        )
