"""
In-memory record for the users collection.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.models.base_model import RecordModel, utcnow
from app.models.enums import UserRole, UserStatus


class User(RecordModel):
    """
    A console user. The password is kept in plain text and is never
    serialized by the API response schemas.
    """

    username: str
    email: str
    password: str
    firstName: str
    lastName: str
    phone: Optional[str] = None
    bio: Optional[str] = None
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.ACTIVE
    language: Optional[str] = "en"
    timezone: Optional[str] = "UTC"
    avatar: Optional[str] = None

    # Timestamps
    lastActive: datetime = Field(default_factory=utcnow)
    joinDate: datetime = Field(default_factory=utcnow)

    def __repr__(self):
        return f"<User {self.username} ({self.role})>"
