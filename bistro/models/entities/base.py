from datetime import datetime
from typing import Annotated, Any, Optional

from bson import ObjectId
from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    ValidationError,
    WithJsonSchema,
    WrapValidator,
)


def validate_object_id(v: Any) -> Optional[ObjectId]:
    """Validate and convert to ObjectId for entity models."""
    if v is None:
        return None
    if isinstance(v, ObjectId):
        return v
    if isinstance(v, str):
        if not ObjectId.is_valid(v):
            raise ValueError(f"Invalid ObjectId: {v}")
        return ObjectId(v)
    raise ValueError(f"Invalid ObjectId: {v}")


def lenient_datetime(v: Any, handler) -> Optional[datetime]:
    # Bookkeeping only; an unparseable stored value reads back as missing
    try:
        return handler(v)
    except ValidationError:
        return None


# Stored as ObjectId, serialized as its hex string
PyObjectId = Annotated[
    ObjectId,
    BeforeValidator(validate_object_id),
    PlainSerializer(lambda x: str(x), return_type=str),
    WithJsonSchema({"type": "string"}, mode="serialization"),
]

Timestamp = Annotated[Optional[datetime], WrapValidator(lenient_datetime)]


class BaseEntity(BaseModel):
    """Base entity with common fields for all database entities

    Documents are schemaless, so fields a client stored beyond the declared
    ones are kept and returned as-is.
    """

    id: Optional[PyObjectId] = Field(None, alias="_id")
    created_at: Timestamp = None
    updated_at: Timestamp = None

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="allow",
    )

    def to_public(self) -> dict:
        """JSON-safe representation used in API responses (``_id`` as string)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
