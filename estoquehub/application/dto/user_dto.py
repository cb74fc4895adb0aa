from pydantic import BaseModel


class UserSummary(BaseModel):
    """DTO for public user information (no ID, no password)"""
    name: str
    email: str


class CurrentUser(BaseModel):
    """DTO for the authenticated caller, taken from the bearer token"""
    id: int
    email: str
