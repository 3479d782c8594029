"""
In-memory record for the reports collection.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.models.base_model import RecordModel, utcnow
from app.models.enums import ReportPriority, ReportStatus, ReportType


class Report(RecordModel):
    """
    An incident report filed by a user, optionally about a car.
    userId and carId are references without an existence constraint.
    """

    userId: str
    carId: Optional[str] = None
    type: ReportType
    message: str
    status: ReportStatus = ReportStatus.PENDING
    priority: ReportPriority = ReportPriority.MEDIUM
    createdAt: datetime = Field(default_factory=utcnow)
    resolvedAt: Optional[datetime] = None

    def __repr__(self):
        return f"<Report {self.type} ({self.status})>"
