# Standard library imports
import logging

# Local application imports
from ....core.config import Settings
from ....core.exceptions import ConflictError, ValidationError
from ....core.security import hash_password, create_jwt_token
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User, MIN_NAME_LENGTH
from ....domain.constants import UserFields
from ...dto.auth_dto import UserRegistrationRequest, AuthResponse
from ...dto.user_dto import UserSummary

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class RegisterUserUseCase:
    """Use case for registering a new user"""
    
    def __init__(self, user_repository: UserRepository, settings: Settings) -> None:
        self.user_repository = user_repository
        self.settings = settings
    
    async def execute(self, request: UserRegistrationRequest) -> AuthResponse:
        """
        Register a new user and sign them in
        
        Args:
            request: Registration request with name, email and password
            
        Returns:
            AuthResponse with a bearer token and the public user info
            
        Raises:
            ValidationError: If a field is missing or the name is too short
            ConflictError: If a user with this email already exists
        """
        if not request.name or not request.email or not request.password:
            raise ValidationError("Name, email and password are required.")
        
        if len(request.name) < MIN_NAME_LENGTH:
            raise ValidationError(f"Name must be at least {MIN_NAME_LENGTH} characters.")
        
        if len(request.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes.")
        
        # Check if user already exists
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise ConflictError("A user with this email already exists.")
        
        new_user = User(
            id=None,  # Will be set by repository
            name=request.name,
            email=request.email,
            password_hash=hash_password(request.password),
        )
        
        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.id}")
        
        token = create_jwt_token(
            {
                UserFields.TOKEN_SUBJECT: str(saved_user.id),
                UserFields.EMAIL: saved_user.email,
            },
            self.settings,
        )
        
        return AuthResponse(
            token=token,
            user=UserSummary(name=saved_user.name, email=saved_user.email),
        )
