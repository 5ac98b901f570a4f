from typing import Optional

from .base import BaseEntity


class Review(BaseEntity):
    name: Optional[str] = None
    details: Optional[str] = None
    rating: Optional[float] = None
