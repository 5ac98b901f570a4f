"""Repository exports."""

from .base import BaseRepository, CollectionName
from .cart import CartRepository
from .menu import MenuRepository
from .payment import PaymentRepository
from .review import ReviewRepository
from .user import UserRepository

__all__ = [
    "BaseRepository",
    "CartRepository",
    "CollectionName",
    "MenuRepository",
    "PaymentRepository",
    "ReviewRepository",
    "UserRepository",
]
