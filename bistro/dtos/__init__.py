"""Data Transfer Objects (DTOs) for API requests and responses"""

from .auth import TokenData, TokenRequest
from .base import ApiResponse, DocumentRequest
from .cart import CartItemCreate
from .menu import MenuItemCreate, MenuItemUpdate
from .payment import PaymentCreate, PaymentIntentData, PaymentIntentRequest
from .user import UserUpsertRequest

__all__ = [
    "ApiResponse",
    "CartItemCreate",
    "DocumentRequest",
    "MenuItemCreate",
    "MenuItemUpdate",
    "PaymentCreate",
    "PaymentIntentData",
    "PaymentIntentRequest",
    "TokenData",
    "TokenRequest",
    "UserUpsertRequest",
]
