from pydantic import BaseModel, EmailStr, Field

from app.schemas.user import UserPublic

class LoginRequest(BaseModel):
    """Schema for the login request body."""
    email: EmailStr = Field(..., description="Account email")
    password: str = Field(..., min_length=1, description="Account password")

class LoginResponse(BaseModel):
    """Schema for a successful login."""
    token: str = Field(..., description="Opaque bearer token")
    user: UserPublic
