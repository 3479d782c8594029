"""
Import all record models from their respective modules.
"""

from app.models.user import User
from app.models.car import Car
from app.models.report import Report
from app.models.session import Session

# Export all models
__all__ = [
    "User",
    "Car",
    "Report",
    "Session",
]
