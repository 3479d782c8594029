"""
In-memory record store for users, cars, reports and login sessions.

The store is an ordinary object owned by the application instance
(``app.state.store``) and handed to request handlers through the
``get_store`` dependency. Nothing here survives a process restart.
"""

import logging
import secrets
import threading
from datetime import timedelta
from typing import Any, Dict, Generic, Iterable, List, Mapping, Optional, Type, TypeVar

from app.core.exceptions import DuplicateRecordError
from app.models.base_model import RecordModel, new_record_id, utcnow
from app.models.car import Car
from app.models.report import Report
from app.models.session import Session
from app.models.user import User

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=RecordModel)


class Collection(Generic[RecordT]):
    """
    A keyed collection of one record type.

    Every record gets a fresh id on creation; ``update`` merges the given
    fields shallowly over the stored record and never creates one.
    Fields listed in ``unique_fields`` are backed by a value -> id index
    that is kept in step with the primary map.
    """

    def __init__(
        self,
        model: Type[RecordT],
        lock: threading.RLock,
        unique_fields: Iterable[str] = (),
    ):
        self._model = model
        self._lock = lock
        self._records: Dict[str, RecordT] = {}
        self._indexes: Dict[str, Dict[str, str]] = {field: {} for field in unique_fields}

    @property
    def entity(self) -> str:
        return self._model.__name__

    def get(self, record_id: str) -> Optional[RecordT]:
        with self._lock:
            return self._records.get(record_id)

    def get_by(self, field: str, value: str) -> Optional[RecordT]:
        """Look up a record by one of the indexed unique fields."""
        with self._lock:
            record_id = self._indexes[field].get(value)
            return self._records.get(record_id) if record_id else None

    def all(self) -> List[RecordT]:
        with self._lock:
            return list(self._records.values())

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def create(self, fields: Mapping[str, Any]) -> RecordT:
        with self._lock:
            # The id is always assigned here, never taken from the caller
            data = {key: value for key, value in fields.items() if key != "id"}
            record = self._model.model_validate({**data, "id": new_record_id()})
            self._check_unique(record)
            self._records[record.id] = record
            self._index(record)
            return record

    def update(self, record_id: str, changes: Mapping[str, Any]) -> Optional[RecordT]:
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                return None
            data = {key: value for key, value in changes.items() if key != "id"}
            merged = self._model.model_validate({**current.model_dump(), **data})
            self._check_unique(merged)
            self._unindex(current)
            self._records[record_id] = merged
            self._index(merged)
            return merged

    def delete(self, record_id: str) -> bool:
        with self._lock:
            record = self._records.pop(record_id, None)
            if record is None:
                return False
            self._unindex(record)
            return True

    def _check_unique(self, record: RecordT) -> None:
        for field, index in self._indexes.items():
            value = getattr(record, field)
            owner = index.get(value)
            if owner is not None and owner != record.id:
                raise DuplicateRecordError(self.entity, field, value)

    def _index(self, record: RecordT) -> None:
        for field, index in self._indexes.items():
            index[getattr(record, field)] = record.id

    def _unindex(self, record: RecordT) -> None:
        for field, index in self._indexes.items():
            index.pop(getattr(record, field), None)


class RecordStore:
    """Authoritative in-memory holder of all collections and sessions."""

    def __init__(self, session_ttl: Optional[timedelta] = None):
        self._lock = threading.RLock()
        self.users: Collection[User] = Collection(User, self._lock, unique_fields=("username", "email"))
        self.cars: Collection[Car] = Collection(Car, self._lock)
        self.reports: Collection[Report] = Collection(Report, self._lock)
        self._sessions: Dict[str, Session] = {}
        self.session_ttl = session_ttl

    # User lookups

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.users.get_by("username", username)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.users.get_by("email", email)

    # Sessions

    def create_session(self, user: User) -> str:
        """Issue a new opaque token for the user and return it."""
        token = secrets.token_urlsafe(32)
        with self._lock:
            self._purge_expired()
            self._sessions[token] = Session(token=token, userId=user.id)
        return token

    def get_session(self, token: str) -> Optional[Session]:
        """Return the session for the token, dropping it if it has expired."""
        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                return None
            if session.is_expired(self.session_ttl):
                logger.info(f"Session for user {session.userId} expired")
                del self._sessions[token]
                return None
            return session

    def validate_token(self, token: str) -> Optional[User]:
        """Resolve a token to the current state of its user, if any."""
        with self._lock:
            session = self.get_session(token)
            if session is None:
                return None
            return self.users.get(session.userId)

    def revoke_session(self, token: str) -> bool:
        with self._lock:
            return self._sessions.pop(token, None) is not None

    def session_count(self) -> int:
        with self._lock:
            self._purge_expired()
            return len(self._sessions)

    def _purge_expired(self) -> None:
        if self.session_ttl is None:
            return
        now = utcnow()
        expired = [token for token, session in self._sessions.items() if session.is_expired(self.session_ttl, now)]
        for token in expired:
            del self._sessions[token]
        if expired:
            logger.info(f"Dropped {len(expired)} expired sessions")
