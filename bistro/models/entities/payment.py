"""Payment entity - a settled checkout and the cart items it covered"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import BaseEntity


class Payment(BaseEntity):
    email: str
    price: float
    transactionId: Optional[str] = None
    date: Optional[datetime] = None
    cartIds: List[str] = Field(default_factory=list)
    menuItemIds: List[str] = Field(default_factory=list)
    status: Optional[str] = None
