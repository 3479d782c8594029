import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.db.session import get_store
from app.db.store import RecordStore
from app.models.session import Session
from app.models.user import User

logger = logging.getLogger(__name__)

# Security scheme for Swagger UI. Missing credentials are reported by
# get_current_session so the message can say what was wrong.
security = HTTPBearer(auto_error=False)

def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )

def get_current_session(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    store: RecordStore = Depends(get_store),
) -> Session:
    """Dependency that resolves the bearer token to its session."""
    if credentials is None:
        # A header with another scheme is a token we cannot accept, not a missing one
        if request.headers.get("Authorization", "").strip():
            logger.warning("Rejected request with a non-Bearer Authorization header")
            raise _unauthorized("Invalid token")
        raise _unauthorized("No token provided")

    session = store.get_session(credentials.credentials)
    if session is None:
        logger.warning("Rejected request with an unknown or expired token")
        raise _unauthorized("Invalid token")

    return session

def get_current_user(
    session: Session = Depends(get_current_session),
    store: RecordStore = Depends(get_store),
) -> User:
    """Dependency to get the live user record behind the session."""
    user = store.users.get(session.userId)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user

def records_auth(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    store: RecordStore = Depends(get_store),
) -> None:
    """
    Router dependency for the users, cars and reports endpoints.
    Only enforces a session when REQUIRE_AUTH_FOR_RECORDS is enabled.
    """
    if request.app.state.settings.REQUIRE_AUTH_FOR_RECORDS:
        get_current_session(request, credentials, store)
