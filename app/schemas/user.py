from typing import ClassVar, FrozenSet, Optional
from pydantic import BaseModel, EmailStr, Field
from datetime import datetime

from app.models.enums import UserRole, UserStatus
from app.schemas.common import CreateModel, PatchModel

class UserCreate(CreateModel):
    """Schema for creating a user from the admin console."""
    username: str = Field(..., min_length=1, description="Unique login name")
    email: EmailStr = Field(..., description="Unique email address")
    password: str = Field(..., min_length=1, description="Password (stored as given)")
    firstName: str = Field(..., description="First name")
    lastName: str = Field(..., description="Last name")
    phone: Optional[str] = Field(None, description="Phone number")
    bio: Optional[str] = Field(None, description="Short biography")
    role: UserRole = Field(UserRole.USER, description="admin, user or driver")
    status: UserStatus = Field(UserStatus.ACTIVE, description="active, inactive or suspended")
    language: Optional[str] = Field("en", description="UI language code")
    timezone: Optional[str] = Field("UTC", description="Preferred timezone")
    avatar: Optional[str] = Field(None, description="Avatar image URL")

class UserUpdate(PatchModel):
    """Fields an administrator may change on any user."""
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"username", "email", "firstName", "lastName", "role", "status"})

    username: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    role: Optional[UserRole] = None
    status: Optional[UserStatus] = None
    language: Optional[str] = None
    timezone: Optional[str] = None
    avatar: Optional[str] = None

class ProfileUpdate(PatchModel):
    """Fields a signed-in user may change on their own record. Role and status are not among them."""
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"email", "firstName", "lastName"})

    firstName: Optional[str] = None
    lastName: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    language: Optional[str] = None
    timezone: Optional[str] = None
    avatar: Optional[str] = None

class UserPublic(BaseModel):
    """Schema for returning a user. The password is never part of it."""
    id: str = Field(..., description="User ID")
    username: str
    email: str
    firstName: str
    lastName: str
    phone: Optional[str] = None
    bio: Optional[str] = None
    role: UserRole
    status: UserStatus
    language: Optional[str] = None
    timezone: Optional[str] = None
    avatar: Optional[str] = None
    lastActive: datetime
    joinDate: datetime

    model_config = {
        "from_attributes": True,
        "json_schema_extra": {
            "example": {
                "id": "7c9e6679-7425-40de-944b-e07fc1f90ae7",
                "username": "jane.cooper",
                "email": "jane.cooper@example.com",
                "firstName": "Jane",
                "lastName": "Cooper",
                "phone": "+1 (555) 234-5678",
                "bio": "Regular user",
                "role": "user",
                "status": "active",
                "language": "en",
                "timezone": "UTC-5",
                "avatar": None,
                "lastActive": "2024-01-20T10:00:00Z",
                "joinDate": "2024-01-15T00:00:00Z"
            }
        }
    }
