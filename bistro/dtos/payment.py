from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .base import DocumentRequest, FinitePrice


class PaymentCreate(DocumentRequest):
    email: str
    price: FinitePrice
    transactionId: Optional[str] = None
    date: Optional[datetime] = None
    cartIds: List[str] = Field(default_factory=list)
    menuItemIds: List[str] = Field(default_factory=list)
    status: Optional[str] = None


class PaymentIntentRequest(BaseModel):
    price: FinitePrice


class PaymentIntentData(BaseModel):
    clientSecret: str
    paymentIntentId: str
    amount: int
