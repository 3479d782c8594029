from typing import ClassVar, FrozenSet, Optional
from pydantic import BaseModel, Field, field_validator
from datetime import datetime

from app.models.enums import CarStatus
from app.schemas.common import CreateModel, DecimalString, PatchModel, blank_to_none

class CarCreate(CreateModel):
    """Schema for registering a car."""
    make: str = Field(..., description="Manufacturer (e.g., 'Toyota')")
    model: str = Field(..., description="Model name (e.g., 'Camry')")
    year: int = Field(..., strict=True, description="Manufacturing year")
    licensePlate: str = Field(..., description="License plate")
    owner: str = Field(..., description="Owner name")
    status: CarStatus = Field(..., description="active, inactive or maintenance")
    location: Optional[str] = Field(None, description="Free-text location")
    latitude: Optional[DecimalString] = Field(None, description="Latitude as a decimal string")
    longitude: Optional[DecimalString] = Field(None, description="Longitude as a decimal string")
    image: Optional[str] = Field(None, description="Image URL")

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def blank_coordinates(cls, v):
        return blank_to_none(v)

class CarUpdate(PatchModel):
    """Fields that may be changed on a car."""
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"make", "model", "year", "licensePlate", "owner", "status"})

    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = Field(None, strict=True)
    licensePlate: Optional[str] = None
    owner: Optional[str] = None
    status: Optional[CarStatus] = None
    location: Optional[str] = None
    latitude: Optional[DecimalString] = None
    longitude: Optional[DecimalString] = None
    image: Optional[str] = None

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def blank_coordinates(cls, v):
        return blank_to_none(v)

class CarResponse(BaseModel):
    """Schema for returning a car."""
    id: str = Field(..., description="Car ID")
    make: str
    model: str
    year: int
    licensePlate: str
    owner: str
    status: CarStatus
    location: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    image: Optional[str] = None
    createdAt: datetime

    model_config = {
        "from_attributes": True
    }
