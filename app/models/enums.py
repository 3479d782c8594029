"""
Enumerated values shared by the record models and the request schemas.
"""

from enum import Enum


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"
    DRIVER = "driver"


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class CarStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    MAINTENANCE = "maintenance"


class ReportType(str, Enum):
    ACCIDENT = "accident"
    MAINTENANCE = "maintenance"
    COMPLAINT = "complaint"
    FEEDBACK = "feedback"


class ReportStatus(str, Enum):
    PENDING = "pending"
    REVIEWED = "reviewed"
    RESOLVED = "resolved"


class ReportPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
