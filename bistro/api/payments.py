"""Payment endpoints: checkout recording and Stripe payment intents."""

from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from bistro.api.deps import get_db, get_payment_gateway
from bistro.dtos import ApiResponse, PaymentCreate, PaymentIntentRequest
from bistro.services.payment_gateway import PaymentGateway
from bistro.services.payment_service import PaymentService, create_payment_intent

router = APIRouter(tags=["Payments"])


@router.post(
    "/payment", response_model=ApiResponse, status_code=status.HTTP_201_CREATED
)
def record_payment(payload: PaymentCreate, db: Database = Depends(get_db)):
    """Store the payment, then remove the cart items it settled."""
    return PaymentService(db).record_payment(payload)


@router.get("/payment/{email}", response_model=ApiResponse)
def list_payments(email: str, db: Database = Depends(get_db)):
    return PaymentService(db).list_payments(email)


@router.post("/create-confirm-intent", response_model=ApiResponse)
def create_confirm_intent(
    payload: PaymentIntentRequest,
    gateway: PaymentGateway = Depends(get_payment_gateway),
):
    return create_payment_intent(gateway, payload)
