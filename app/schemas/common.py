from typing import Annotated, Any, ClassVar, FrozenSet
from pydantic import BaseModel, ConfigDict, Field, model_validator

# Latitude/longitude are carried as decimal strings, e.g. "-74.0060"
DecimalString = Annotated[str, Field(pattern=r"^-?\d+(\.\d+)?$")]

def blank_to_none(value: Any) -> Any:
    """Map empty or whitespace-only strings to None; the console sends "" for unset fields."""
    if isinstance(value, str) and not value.strip():
        return None
    return value

class MessageResponse(BaseModel):
    """Schema for responses that only carry a confirmation or error message."""
    message: str = Field(..., description="Human readable message")

class CreateModel(BaseModel):
    """Base schema for creation payloads. Unknown keys, including id, are dropped."""
    model_config = ConfigDict(extra="ignore", use_enum_values=True)

class PatchModel(BaseModel):
    """
    Base schema for partial updates.

    Only declared fields are accepted. Fields named in ``non_nullable`` may be
    omitted but not explicitly set to null.
    """
    model_config = ConfigDict(extra="forbid", use_enum_values=True)

    non_nullable: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        for name in self.model_fields_set & self.non_nullable:
            if getattr(self, name) is None:
                raise ValueError(f"{name} may not be null")
        return self

    def changes(self) -> dict:
        """Return only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)
