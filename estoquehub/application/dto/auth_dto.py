from typing import Optional

from pydantic import BaseModel

from .user_dto import UserSummary


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request.
    
    Fields are optional at the schema level so that a missing field is
    reported with the same message as an empty one.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    email: Optional[str] = None
    password: Optional[str] = None


class AuthResponse(BaseModel):
    """DTO for register/login response: bearer token plus public user info"""
    token: str
    user: UserSummary
