from typing import List
from fastapi import APIRouter, Depends, HTTPException, status

import logging

from app.api.deps import body_docs, conflict, validated_body
from app.core.exceptions import DuplicateRecordError
from app.db.session import get_store
from app.db.store import RecordStore
from app.schemas.common import MessageResponse
from app.schemas.user import UserCreate, UserPublic, UserUpdate

logger = logging.getLogger(__name__)

router = APIRouter()

def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

@router.get("", response_model=List[UserPublic])
def list_users(store: RecordStore = Depends(get_store)):
    """
    List every user. Passwords are never included.
    """
    return store.users.all()

@router.post("", response_model=UserPublic, status_code=status.HTTP_201_CREATED, openapi_extra=body_docs(UserCreate))
def create_user(
    user_data: UserCreate = Depends(validated_body(UserCreate, "Invalid user data")),
    store: RecordStore = Depends(get_store),
):
    """
    Create a user. Username and email must not be taken.
    """
    try:
        user = store.users.create(user_data.model_dump())
    except DuplicateRecordError as e:
        raise conflict(e)

    logger.info(f"Created user {user.id} ({user.username})")
    return user

@router.get("/{user_id}", response_model=UserPublic)
def get_user(user_id: str, store: RecordStore = Depends(get_store)):
    user = store.users.get(user_id)
    if user is None:
        raise _not_found()
    return user

@router.put("/{user_id}", response_model=UserPublic, openapi_extra=body_docs(UserUpdate))
def update_user(
    user_id: str,
    changes: UserUpdate = Depends(validated_body(UserUpdate, "Invalid user data")),
    store: RecordStore = Depends(get_store),
):
    """
    Apply a partial update to a user. Fields not sent are left unchanged.
    """
    try:
        user = store.users.update(user_id, changes.changes())
    except DuplicateRecordError as e:
        raise conflict(e)

    if user is None:
        raise _not_found()
    return user

@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(user_id: str, store: RecordStore = Depends(get_store)):
    """
    Delete a user. Reports filed by the user are kept.
    """
    if not store.users.delete(user_id):
        raise _not_found()

    logger.info(f"Deleted user {user_id}")
    return MessageResponse(message="User deleted successfully")
