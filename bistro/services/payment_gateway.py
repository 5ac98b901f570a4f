"""Stripe payment-intent client."""

from __future__ import annotations

import logging
from typing import Any, Optional

import stripe

logger = logging.getLogger(__name__)

# Stripe rejects USD charges below 50 cents
MINIMUM_AMOUNT_CENTS = 50


class PaymentGatewayError(Exception):
    """The payment gateway rejected or failed a request."""


class PaymentGatewayNotConfigured(PaymentGatewayError):
    """No secret key is configured for the payment gateway."""


def to_minor_units(price: float) -> int:
    return int(round(price * 100))


class PaymentGateway:
    def __init__(self, api_key: Optional[str], currency: str = "usd"):
        self.api_key = api_key
        self.currency = currency

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def create_payment_intent(
        self, amount: int, metadata: Optional[dict[str, str]] = None
    ) -> dict[str, Any]:
        """Create a card PaymentIntent for ``amount`` minor units."""
        if not self.configured:
            raise PaymentGatewayNotConfigured("payment gateway not configured")

        try:
            intent = stripe.PaymentIntent.create(
                amount=amount,
                currency=self.currency,
                payment_method_types=["card"],
                metadata=metadata or {},
                api_key=self.api_key,
            )
        except stripe.StripeError as exc:
            logger.error("Stripe PaymentIntent creation failed: %s", exc)
            raise PaymentGatewayError(str(exc)) from exc

        logger.info("Created PaymentIntent %s for %s %s", intent.id, amount, self.currency)
        return {
            "clientSecret": intent.client_secret,
            "paymentIntentId": intent.id,
            "amount": amount,
        }
