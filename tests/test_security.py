"""Unit tests for app.core.security: bcrypt hashing and JWT issue/verify."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt
from pydantic import SecretStr

from app.core.config import Settings
from app.core.security import (
    TokenIdentity,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def _settings(**overrides: object) -> Settings:
    """Build Settings with a test secret; overrides win."""
    values: dict[str, object] = {"JWT_SECRET": SecretStr("unit-test-secret"), "BCRYPT_ROUNDS": 4}
    values.update(overrides)
    return Settings(**values)


class TestHashPassword(unittest.TestCase):
    """hash_password is salted and one-way; verify_password accepts only the hashed input."""

    def test_same_password_hashes_differently(self) -> None:
        first = hash_password("pw", rounds=4)
        second = hash_password("pw", rounds=4)
        self.assertNotEqual(first, second)

    def test_hash_is_not_plaintext(self) -> None:
        hashed = hash_password("hunter2", rounds=4)
        self.assertNotIn("hunter2", hashed)
        self.assertTrue(hashed.startswith("$2"))

    def test_verify_matches_same_password(self) -> None:
        hashed = hash_password("correct horse", rounds=4)
        self.assertTrue(verify_password("correct horse", hashed))

    def test_verify_rejects_wrong_password(self) -> None:
        hashed = hash_password("correct horse", rounds=4)
        self.assertFalse(verify_password("battery staple", hashed))

    def test_work_factor_is_embedded(self) -> None:
        hashed = hash_password("pw", rounds=5)
        self.assertEqual(hashed.split("$")[2], "05")
        self.assertTrue(verify_password("pw", hashed))

    def test_malformed_hash_returns_false(self) -> None:
        self.assertFalse(verify_password("pw", "not-a-bcrypt-hash"))
        self.assertFalse(verify_password("pw", ""))

    def test_long_password_is_truncated_consistently(self) -> None:
        long_pw = "x" * 100
        hashed = hash_password(long_pw, rounds=4)
        self.assertTrue(verify_password(long_pw, hashed))


class TestAccessToken(unittest.TestCase):
    """create_access_token / decode_access_token round trip and rejection paths."""

    def test_round_trip_returns_identity(self) -> None:
        settings = _settings()
        token = create_access_token("alice", "user", settings)
        self.assertEqual(decode_access_token(token, settings), TokenIdentity("alice", "user"))

    def test_payload_has_username_role_and_iat_only(self) -> None:
        settings = _settings()
        token = create_access_token("admin", "admin", settings)
        payload = jwt.decode(token, "unit-test-secret", algorithms=["HS256"])
        self.assertEqual(set(payload), {"username", "role", "iat"})

    def test_other_secret_is_rejected(self) -> None:
        token = create_access_token("alice", "user", _settings())
        other = _settings(JWT_SECRET=SecretStr("a-different-secret"))
        with self.assertRaises(jwt.InvalidSignatureError):
            decode_access_token(token, other)

    def test_garbage_is_rejected(self) -> None:
        with self.assertRaises(jwt.InvalidTokenError):
            decode_access_token("garbage", _settings())

    def test_missing_claims_are_rejected(self) -> None:
        token = jwt.encode({"sub": "1"}, "unit-test-secret", algorithm="HS256")
        with self.assertRaises(jwt.InvalidTokenError):
            decode_access_token(token, _settings())

    def test_expiry_only_when_configured(self) -> None:
        token = create_access_token("alice", "user", _settings(JWT_EXPIRE_MINUTES=5))
        payload = jwt.decode(token, "unit-test-secret", algorithms=["HS256"])
        self.assertIn("exp", payload)

    def test_expired_token_is_rejected(self) -> None:
        past = datetime.now(UTC) - timedelta(minutes=10)
        token = jwt.encode(
            {"username": "alice", "role": "user", "iat": past, "exp": past + timedelta(minutes=1)},
            "unit-test-secret",
            algorithm="HS256",
        )
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_access_token(token, _settings())


if __name__ == "__main__":
    unittest.main()
