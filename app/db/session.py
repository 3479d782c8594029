from fastapi import Request

from app.db.store import RecordStore

# Dependency to get the record store
def get_store(request: Request) -> RecordStore:
    """
    Dependency for FastAPI endpoints that need the record store.
    Returns the store owned by the application handling the request.
    """
    return request.app.state.store
