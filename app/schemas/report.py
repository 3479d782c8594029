from typing import ClassVar, FrozenSet, Optional
from pydantic import BaseModel, Field
from datetime import datetime

from app.models.enums import ReportPriority, ReportStatus, ReportType
from app.schemas.common import CreateModel, PatchModel

class ReportCreate(CreateModel):
    """Schema for filing a report."""
    userId: str = Field(..., description="ID of the reporting user")
    carId: Optional[str] = Field(None, description="ID of the car concerned, if any")
    type: ReportType = Field(..., description="accident, maintenance, complaint or feedback")
    message: str = Field(..., min_length=1, description="Report text")
    status: ReportStatus = Field(ReportStatus.PENDING, description="pending, reviewed or resolved")
    priority: ReportPriority = Field(ReportPriority.MEDIUM, description="low, medium or high")

class ReportUpdate(PatchModel):
    """Fields that may be changed on a report."""
    non_nullable: ClassVar[FrozenSet[str]] = frozenset({"type", "message", "status", "priority"})

    carId: Optional[str] = None
    type: Optional[ReportType] = None
    message: Optional[str] = Field(None, min_length=1)
    status: Optional[ReportStatus] = None
    priority: Optional[ReportPriority] = None
    resolvedAt: Optional[datetime] = None

class ReportResponse(BaseModel):
    """Schema for returning a report."""
    id: str = Field(..., description="Report ID")
    userId: str
    carId: Optional[str] = None
    type: ReportType
    message: str
    status: ReportStatus
    priority: ReportPriority
    createdAt: datetime
    resolvedAt: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }
