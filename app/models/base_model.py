from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, ConfigDict


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_record_id() -> str:
    return str(uuid4())


class RecordModel(BaseModel):
    """Base class for all records held by the record store."""

    model_config = ConfigDict(use_enum_values=True)

    # Assigned by the store on creation
    id: str
