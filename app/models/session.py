"""
Session record issued on login.
"""

from datetime import datetime, timedelta
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.base_model import utcnow


class Session(BaseModel):
    """
    Maps an opaque bearer token to a user id. The user is resolved live on
    every request, so changes made after login are visible to the session.
    """

    model_config = ConfigDict(frozen=True)

    token: str
    userId: str
    issuedAt: datetime = Field(default_factory=utcnow)

    def is_expired(self, ttl: Optional[timedelta], now: Optional[datetime] = None) -> bool:
        # No ttl means the session never expires
        if ttl is None:
            return False
        return (now or utcnow()) >= self.issuedAt + ttl
