# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse
from ...application.dto.user_dto import CurrentUser
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...di.container import DIContainer
from .dependencies import get_container, get_current_user


router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    request: UserRegistrationRequest,
    container: DIContainer = Depends(get_container),
) -> AuthResponse:
    """
    Register a new user
    
    Args:
        request: User registration request
        
    Returns:
        AuthResponse with a bearer token and the user's name and email
    """
    register_use_case = container.get(RegisterUserUseCase)
    return await register_use_case.execute(request)


@router.post("/login", response_model=AuthResponse)
async def login_user(
    request: UserLoginRequest,
    container: DIContainer = Depends(get_container),
) -> AuthResponse:
    """
    Authenticate user and get access token
    
    Args:
        request: User login request
        
    Returns:
        AuthResponse with a bearer token and the user's name and email
    """
    login_use_case = container.get(LoginUserUseCase)
    return await login_use_case.execute(request)


@router.get("/me", response_model=CurrentUser)
async def get_me(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    """Return the identity carried by the bearer token"""
    return current_user
