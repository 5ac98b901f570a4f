"""Menu item entity - a dish offered by the restaurant"""

from typing import Optional

from .base import BaseEntity


class MenuItem(BaseEntity):
    name: str
    category: Optional[str] = None
    price: Optional[float] = None
    recipe: Optional[str] = None
    image: Optional[str] = None
