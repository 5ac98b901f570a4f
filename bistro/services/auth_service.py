"""Bearer token issuance and verification.

Tokens are HS256 JWTs signed with ``settings.SECRET_KEY`` and carry the
user's email in ``sub``. Expiry is the only way a token stops working.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Optional

from jose import ExpiredSignatureError, JWTError, jwt

from bistro.config import settings
from bistro.dtos import ApiResponse, TokenData, TokenRequest


class TokenError(str, Enum):
    MISSING = "missing"
    MALFORMED = "malformed"
    INVALID = "invalid"
    EXPIRED = "expired"


@dataclass(frozen=True)
class TokenVerification:
    """Outcome of verifying a token: the identity or why it was rejected."""

    email: Optional[str] = None
    error: Optional[TokenError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.email is not None


def create_access_token(
    email: str,
    claims: Optional[dict[str, Any]] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = dict(claims or {})
    payload.update(
        {
            "sub": email,
            "email": email,
            "iat": now,
            "exp": now + expires_delta,
        }
    )
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_access_token(token: Optional[str]) -> TokenVerification:
    if not token:
        return TokenVerification(error=TokenError.MISSING)
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except ExpiredSignatureError:
        return TokenVerification(error=TokenError.EXPIRED)
    except JWTError:
        return TokenVerification(error=TokenError.INVALID)

    email = payload.get("email") or payload.get("sub")
    if not email:
        return TokenVerification(error=TokenError.INVALID)
    return TokenVerification(email=email)


def parse_bearer_header(authorization: Optional[str]) -> TokenVerification:
    """Verify an ``Authorization: Bearer <token>`` header value."""
    if not authorization:
        return TokenVerification(error=TokenError.MISSING)
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return TokenVerification(error=TokenError.MALFORMED)
    return verify_access_token(token.strip())


def issue_token(request: TokenRequest) -> ApiResponse:
    """Sign the submitted identity payload into a bearer token."""
    claims = request.model_dump(exclude={"email"})
    token = create_access_token(request.email, claims=claims)
    data = TokenData(
        token=token, expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
    )
    return ApiResponse(message="token issued", data=data.model_dump())
