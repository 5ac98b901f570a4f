"""Common response envelope and request base classes."""

from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Written by the repository layer; never taken from a request body
RESERVED_FIELDS = ("_id", "id", "created_at", "updated_at")

FinitePrice = Annotated[float, Field(allow_inf_nan=False)]


class ApiResponse(BaseModel):
    """``{success, message, data}`` envelope returned by every handler."""

    success: bool = True
    message: Optional[str] = None
    data: Any = None


class DocumentRequest(BaseModel):
    """Body that becomes (part of) a stored document.

    Unknown keys are kept since documents are schemaless, except the
    bookkeeping fields in ``RESERVED_FIELDS``.
    """

    model_config = ConfigDict(extra="allow")

    @model_validator(mode="before")
    @classmethod
    def drop_reserved_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if k not in RESERVED_FIELDS}
        return data
