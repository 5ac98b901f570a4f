"""Database entity models - represents the actual structure stored in MongoDB"""

from .base import BaseEntity, PyObjectId
from .cart_item import CartItem
from .menu_item import MenuItem
from .payment import Payment
from .review import Review
from .user import ADMIN_ROLE, User

__all__ = [
    "ADMIN_ROLE",
    "BaseEntity",
    "CartItem",
    "MenuItem",
    "Payment",
    "PyObjectId",
    "Review",
    "User",
]
