"""Authorization guards for FastAPI routes.

Routes list their guards in order through ``dependencies=[...]``:
``verify_token`` establishes the caller's email, ``verify_admin`` and
``verify_self`` build on it. Any failure raises :class:`AuthorizationError`,
rendered as a 403 before the handler runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header, Request
from pymongo.database import Database

from bistro.database.mongo import get_db
from bistro.repositories import UserRepository
from bistro.services.auth_service import parse_bearer_header

logger = logging.getLogger(__name__)

FORBIDDEN_MESSAGE = "forbidden access"


class AuthorizationError(Exception):
    def __init__(self, reason: str, message: str = FORBIDDEN_MESSAGE):
        super().__init__(reason)
        self.reason = reason
        self.message = message


@dataclass(frozen=True)
class AuthIdentity:
    email: str


async def verify_token(
    request: Request,
    authorization: Optional[str] = Header(None),
) -> AuthIdentity:
    result = parse_bearer_header(authorization)
    if not result.ok:
        logger.info(
            "Rejected token on %s %s: %s",
            request.method,
            request.url.path,
            result.error.value if result.error else "invalid",
        )
        raise AuthorizationError(result.error.value if result.error else "invalid")

    request.state.email = result.email
    return AuthIdentity(email=result.email)


def verify_admin(
    identity: AuthIdentity = Depends(verify_token),
    db: Database = Depends(get_db),
) -> AuthIdentity:
    user = UserRepository(db).find_by_email(identity.email)
    if user is None or not user.is_admin:
        logger.info("Non-admin %s denied admin route", identity.email)
        raise AuthorizationError("not_admin")
    return identity


async def verify_self(
    email: str,
    identity: AuthIdentity = Depends(verify_token),
) -> AuthIdentity:
    """Only let callers read resources keyed by their own email."""
    if email != identity.email:
        logger.info("%s denied access to resources of %s", identity.email, email)
        raise AuthorizationError("identity_mismatch")
    return identity
