"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from bson.errors import InvalidId
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from bistro import __version__
from bistro.api import auth, carts, health, menu, payments, users
from bistro.config import settings
from bistro.core.logging import setup_logging
from bistro.database.mongo import create_client, ensure_indexes
from bistro.middleware.auth import AuthorizationError
from bistro.middleware.request_logging import RequestLoggingMiddleware
from bistro.services.payment_gateway import (
    PaymentGateway,
    PaymentGatewayError,
    PaymentGatewayNotConfigured,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the MongoDB client and payment gateway for the process lifetime."""
    client = create_client(settings.MONGODB_URI)
    app.state.mongo_client = client
    app.state.db = client[settings.MONGODB_DB_NAME]
    app.state.payment_gateway = PaymentGateway(
        settings.STRIPE_SECRET_KEY, currency=settings.PAYMENT_CURRENCY
    )
    if not app.state.payment_gateway.configured:
        logger.warning("STRIPE_SECRET_KEY is not set; payment intents are disabled")

    try:
        ensure_indexes(app.state.db)
        logger.info("%s started", settings.APP_NAME)
        yield
    finally:
        client.close()
        logger.info("MongoDB connection closed")


async def authorization_error_handler(request: Request, exc: AuthorizationError):
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN, content={"message": exc.message}
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "invalid request body",
            "errors": [
                {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
                for error in exc.errors()
            ],
        },
    )


async def store_error_handler(request: Request, exc: Exception):
    logger.error(
        "Database operation failed on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "database operation failed"},
    )


async def document_error_handler(request: Request, exc: ValidationError):
    logger.error(
        "Stored %s document failed validation on %s %s",
        exc.title,
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "stored document is invalid"},
    )


async def payment_gateway_error_handler(request: Request, exc: PaymentGatewayError):
    if isinstance(exc, PaymentGatewayNotConfigured):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"message": str(exc)},
        )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "payment gateway request failed"},
    )


def create_app() -> FastAPI:
    """FastAPI application factory."""
    setup_logging(settings.LOG_LEVEL, json_output=settings.LOG_JSON)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Restaurant ordering API: menu, reviews, carts, users and payments",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(AuthorizationError, authorization_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(PyMongoError, store_error_handler)
    app.add_exception_handler(InvalidId, store_error_handler)
    app.add_exception_handler(ValidationError, document_error_handler)
    app.add_exception_handler(PaymentGatewayError, payment_gateway_error_handler)

    app.include_router(health.router, tags=["Health"])
    app.include_router(menu.router)
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(carts.router)
    app.include_router(payments.router)

    return app


app = create_app()
