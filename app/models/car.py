"""
In-memory record for the cars collection.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.models.base_model import RecordModel, utcnow
from app.models.enums import CarStatus


class Car(RecordModel):
    """
    A fleet vehicle. The owner is a free-text name, not a user reference.
    """

    make: str
    model: str
    year: int
    licensePlate: str
    owner: str
    status: CarStatus = CarStatus.ACTIVE
    location: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    image: Optional[str] = None
    createdAt: datetime = Field(default_factory=utcnow)

    def __repr__(self):
        return f"<Car {self.make} {self.model} [{self.licensePlate}]>"
