"""Payment recording and cart settlement.

Recording a payment is two independent writes: the payment insert, then the
removal of the cart items it covered. There is no transaction around them, so
a failure between the two leaves a recorded payment whose cart items are still
present. That state is logged with the payment id for manual cleanup.
"""

import logging

from fastapi import HTTPException, status
from pymongo.database import Database
from pymongo.errors import PyMongoError

from bistro.dtos import ApiResponse, PaymentCreate, PaymentIntentData, PaymentIntentRequest
from bistro.repositories import CartRepository, PaymentRepository
from bistro.services.payment_gateway import (
    MINIMUM_AMOUNT_CENTS,
    PaymentGateway,
    to_minor_units,
)

logger = logging.getLogger(__name__)


class PaymentService:
    def __init__(self, db: Database):
        self.db = db
        self.payment_repo = PaymentRepository(db)
        self.cart_repo = CartRepository(db)

    def record_payment(self, payload: PaymentCreate) -> ApiResponse:
        payment = self.payment_repo.insert_one(payload.model_dump(exclude_none=True))

        cart_ids, rejected = self.cart_repo.parse_object_ids(payload.cartIds)
        if rejected:
            logger.warning(
                "Payment %s references malformed cart ids %s; they were not cleared",
                payment.id,
                rejected,
            )

        try:
            deleted = self.cart_repo.delete_by_ids(cart_ids)
        except PyMongoError:
            logger.exception(
                "Payment %s recorded but clearing its cart items failed", payment.id
            )
            raise

        logger.info(
            "Payment %s recorded for %s; %d cart item(s) cleared",
            payment.id,
            payload.email,
            deleted,
        )
        return ApiResponse(
            message="payment recorded",
            data={"paymentId": str(payment.id), "deletedCount": deleted},
        )

    def list_payments(self, email: str) -> ApiResponse:
        payments = self.payment_repo.list_by_email(email)
        return ApiResponse(
            message="payments fetched",
            data=[payment.to_public() for payment in payments],
        )


def create_payment_intent(
    gateway: PaymentGateway, payload: PaymentIntentRequest
) -> ApiResponse:
    amount = to_minor_units(payload.price)
    if amount < MINIMUM_AMOUNT_CENTS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"amount must be at least {MINIMUM_AMOUNT_CENTS} cents",
        )
    intent = gateway.create_payment_intent(amount)
    return ApiResponse(
        message="payment intent created",
        data=PaymentIntentData(**intent).model_dump(),
    )
