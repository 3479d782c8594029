from fastapi import APIRouter, Depends

from app.db.session import get_store
from app.db.store import RecordStore

router = APIRouter()

@router.get("")
async def health_check(store: RecordStore = Depends(get_store)):
    """
    Health check endpoint that reports API status and store contents.

    Args:
        store: Record store dependency

    Returns:
        dict: Health status and record counts
    """
    return {
        "status": "healthy",
        "api": "online",
        "store": "in-memory",
        "records": {
            "users": store.users.count(),
            "cars": store.cars.count(),
            "reports": store.reports.count(),
        },
        "sessions": store.session_count(),
    }
