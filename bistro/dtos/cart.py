from typing import Optional

from .base import DocumentRequest, FinitePrice


class CartItemCreate(DocumentRequest):
    email: str
    menuId: Optional[str] = None
    name: Optional[str] = None
    image: Optional[str] = None
    price: Optional[FinitePrice] = None
