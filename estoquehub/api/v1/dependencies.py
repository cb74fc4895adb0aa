# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, Header, Request

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.user_dto import CurrentUser
from ...core.exceptions import TokenError
from ...di.container import DIContainer


BEARER_SCHEME = "Bearer"


def get_container(request: Request) -> DIContainer:
    """FastAPI dependency returning the container built for this application"""
    return request.app.state.container


async def get_current_user(
    authorization: Optional[str] = Header(default=None),
    container: DIContainer = Depends(get_container),
) -> CurrentUser:
    """
    FastAPI dependency guarding product routes
    
    Requires "Authorization: Bearer <token>" with the scheme spelled exactly
    "Bearer" and a single space before the token.
    
    Args:
        authorization: Raw Authorization header
        
    Returns:
        CurrentUser with the ID and email carried by the token
        
    Raises:
        TokenError: If the header is missing/malformed or the token is invalid
    """
    scheme, _, token = (authorization or "").partition(" ")
    if scheme != BEARER_SCHEME or not token or token[0].isspace():
        raise TokenError("Missing bearer token", user_message="Token not provided.")
    
    get_current_user_use_case = container.get(GetCurrentUserUseCase)
    return await get_current_user_use_case.execute(token)
