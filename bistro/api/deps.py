"""Common dependency aliases for API endpoints."""

from fastapi import Request

from bistro.database.mongo import get_db
from bistro.middleware.auth import verify_admin, verify_self
from bistro.services.payment_gateway import PaymentGateway


def get_payment_gateway(request: Request) -> PaymentGateway:
    """FastAPI dependency returning the gateway built at startup."""
    gateway = getattr(request.app.state, "payment_gateway", None)
    if gateway is None:
        raise RuntimeError("Payment gateway not initialized; application lifespan not started")
    return gateway


__all__ = [
    "get_db",
    "get_payment_gateway",
    "verify_admin",
    "verify_self",
]
