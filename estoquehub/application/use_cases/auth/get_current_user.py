# Local application imports
from ....core.config import Settings
from ....core.exceptions import TokenError
from ....core.security import decode_jwt_token
from ....domain.constants import UserFields
from ...dto.user_dto import CurrentUser


class GetCurrentUserUseCase:
    """Use case for resolving the caller from a bearer token.
    
    Only the token is checked; the user row is not re-read.
    """
    
    def __init__(self, settings: Settings) -> None:
        self.settings = settings
    
    async def execute(self, token: str) -> CurrentUser:
        """
        Get current user from JWT token
        
        Args:
            token: JWT access token
            
        Returns:
            CurrentUser with the ID and email encoded in the token
            
        Raises:
            TokenError: If token is invalid, expired or lacks the user claims
        """
        payload = decode_jwt_token(token, self.settings)
        
        subject = payload.get(UserFields.TOKEN_SUBJECT)
        email = payload.get(UserFields.EMAIL)
        if not subject or not email:
            raise TokenError("Invalid authentication payload: missing user claims")
        
        try:
            user_id = int(subject)
        except (TypeError, ValueError):
            raise TokenError(f"Invalid authentication payload: bad subject {subject!r}")
        
        return CurrentUser(id=user_id, email=email)
