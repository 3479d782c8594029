from fastapi import APIRouter, Depends, HTTPException, status

import logging

from app.api.deps import body_docs, conflict, validated_body
from app.core.exceptions import DuplicateRecordError
from app.core.security import get_current_session, get_current_user
from app.db.session import get_store
from app.db.store import RecordStore
from app.models.base_model import utcnow
from app.models.session import Session
from app.models.user import User
from app.schemas.auth import LoginRequest, LoginResponse
from app.schemas.common import MessageResponse
from app.schemas.user import ProfileUpdate, UserPublic

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/login", response_model=LoginResponse, openapi_extra=body_docs(LoginRequest))
def login(
    credentials: LoginRequest = Depends(validated_body(LoginRequest, "Invalid request data")),
    store: RecordStore = Depends(get_store),
) -> LoginResponse:
    """
    Exchange email and password for a bearer token.

    Unknown email and wrong password produce the same 401 response.
    """
    user = store.get_user_by_email(credentials.email)
    if user is None or user.password != credentials.password:
        logger.warning(f"Failed login attempt for {credentials.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    user = store.users.update(user.id, {"lastActive": utcnow()})
    token = store.create_session(user)
    logger.info(f"User {user.username} logged in")

    return LoginResponse(token=token, user=UserPublic.model_validate(user))

@router.post("/logout", response_model=MessageResponse)
def logout(
    session: Session = Depends(get_current_session),
    store: RecordStore = Depends(get_store),
) -> MessageResponse:
    """
    Revoke the session behind the presented token.
    """
    store.revoke_session(session.token)
    return MessageResponse(message="Logged out successfully")

@router.get("/profile", response_model=UserPublic)
async def get_profile(current_user: User = Depends(get_current_user)):
    """
    Return the signed-in user's profile.

    This endpoint requires a valid bearer token in the Authorization header.
    """
    return current_user

@router.put("/profile", response_model=UserPublic, openapi_extra=body_docs(ProfileUpdate))
def update_profile(
    current_user: User = Depends(get_current_user),
    changes: ProfileUpdate = Depends(validated_body(ProfileUpdate, "Invalid profile data")),
    store: RecordStore = Depends(get_store),
):
    """
    Update the signed-in user's own profile.

    Only personal fields are accepted; role, status, username and password
    cannot be changed through this endpoint.
    """
    try:
        user = store.users.update(current_user.id, changes.changes())
    except DuplicateRecordError as e:
        raise conflict(e)

    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
