"""Cart item entity - a menu selection not yet paid for"""

from typing import Optional

from .base import BaseEntity


class CartItem(BaseEntity):
    email: str
    menuId: Optional[str] = None
    name: Optional[str] = None
    image: Optional[str] = None
    price: Optional[float] = None
