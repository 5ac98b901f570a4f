import unittest
from datetime import datetime, timedelta, timezone

from jose import jwt

from bistro.config import settings
from bistro.services.auth_service import (
    TokenError,
    create_access_token,
    parse_bearer_header,
    verify_access_token,
)


class TestAccessTokens(unittest.TestCase):
    def test_round_trip_returns_email(self):
        token = create_access_token("a@x.com")
        result = verify_access_token(token)
        self.assertTrue(result.ok)
        self.assertEqual(result.email, "a@x.com")

    def test_token_expires_after_configured_window(self):
        token = create_access_token("a@x.com")
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        lifetime = payload["exp"] - payload["iat"]
        self.assertEqual(lifetime, settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60)
        self.assertEqual(settings.ACCESS_TOKEN_EXPIRE_MINUTES, 60)

    def test_extra_claims_are_kept(self):
        token = create_access_token("a@x.com", claims={"name": "Ada"})
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        self.assertEqual(payload["name"], "Ada")
        self.assertEqual(payload["sub"], "a@x.com")

    def test_expired_token(self):
        token = create_access_token("a@x.com", expires_delta=timedelta(minutes=-5))
        result = verify_access_token(token)
        self.assertFalse(result.ok)
        self.assertEqual(result.error, TokenError.EXPIRED)

    def test_token_signed_with_other_secret(self):
        token = jwt.encode(
            {
                "sub": "a@x.com",
                "email": "a@x.com",
                "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
            },
            "not-the-server-secret",
            algorithm="HS256",
        )
        result = verify_access_token(token)
        self.assertEqual(result.error, TokenError.INVALID)

    def test_garbage_token(self):
        self.assertEqual(verify_access_token("abc.def").error, TokenError.INVALID)
        self.assertEqual(verify_access_token("").error, TokenError.MISSING)


class TestBearerHeader(unittest.TestCase):
    def test_missing_header(self):
        self.assertEqual(parse_bearer_header(None).error, TokenError.MISSING)

    def test_wrong_scheme(self):
        token = create_access_token("a@x.com")
        self.assertEqual(parse_bearer_header(f"Basic {token}").error, TokenError.MALFORMED)
        self.assertEqual(parse_bearer_header(token).error, TokenError.MALFORMED)
        self.assertEqual(parse_bearer_header("Bearer ").error, TokenError.MALFORMED)

    def test_valid_header(self):
        token = create_access_token("a@x.com")
        self.assertEqual(parse_bearer_header(f"Bearer {token}").email, "a@x.com")


if __name__ == "__main__":
    unittest.main()
