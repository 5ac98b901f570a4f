from typing import Optional

from pydantic import field_validator

from .base import DocumentRequest, FinitePrice


class MenuItemCreate(DocumentRequest):
    name: str
    category: Optional[str] = None
    price: Optional[FinitePrice] = None
    recipe: Optional[str] = None
    image: Optional[str] = None


class MenuItemUpdate(DocumentRequest):
    """Partial update; only the fields sent are written."""

    name: Optional[str] = None
    category: Optional[str] = None
    price: Optional[FinitePrice] = None
    recipe: Optional[str] = None
    image: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value: Optional[str]) -> str:
        # Runs only when the field is sent; every stored item keeps a name
        if value is None:
            raise ValueError("name cannot be null")
        return value
