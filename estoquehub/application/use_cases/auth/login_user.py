# Standard library imports
import logging

# Local application imports
from ....core.config import Settings
from ....core.exceptions import InvalidCredentialsError, ValidationError
from ....core.security import verify_password, create_jwt_token
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ...dto.auth_dto import UserLoginRequest, AuthResponse
from ...dto.user_dto import UserSummary

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""
    
    def __init__(self, user_repository: UserRepository, settings: Settings) -> None:
        self.user_repository = user_repository
        self.settings = settings
    
    async def execute(self, request: UserLoginRequest) -> AuthResponse:
        """
        Authenticate user and generate access token
        
        Args:
            request: Login request with email and password
            
        Returns:
            AuthResponse with a bearer token and the public user info
            
        Raises:
            ValidationError: If email or password is missing
            InvalidCredentialsError: If the email is unknown or the password
                does not match (same message in both cases)
        """
        if not request.email or not request.password:
            raise ValidationError("Email and password are required.")
        
        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            raise InvalidCredentialsError("Login failed: unknown email")
        
        if not verify_password(request.password, user.password_hash):
            raise InvalidCredentialsError("Login failed: password mismatch")
        
        token = create_jwt_token(
            {
                UserFields.TOKEN_SUBJECT: str(user.id),
                UserFields.EMAIL: user.email,
            },
            self.settings,
        )
        logger.info(f"User {user.id} logged in")
        
        return AuthResponse(
            token=token,
            user=UserSummary(name=user.name, email=user.email),
        )
