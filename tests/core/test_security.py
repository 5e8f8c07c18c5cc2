"""
Unit tests for password hashing and access tokens.
"""

from datetime import timedelta

from jose import jwt

from mou_tracker.core.config import settings
from mou_tracker.core.security import (
    ACCESS_TOKEN_TYPE,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("s3cret-pass")
        assert hashed != "s3cret-pass"
        assert hashed.startswith("$2")

    def test_same_password_gets_different_salts(self):
        assert hash_password("s3cret-pass") != hash_password("s3cret-pass")

    def test_verify_correct_and_wrong_password(self):
        hashed = hash_password("s3cret-pass")
        assert verify_password("s3cret-pass", hashed) is True
        assert verify_password("wrong-pass", hashed) is False

    def test_verify_against_corrupt_hash_returns_false(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False


class TestAccessTokens:
    def test_token_carries_admin_claims(self):
        token = create_access_token(
            subject="0b6f4a7e-3c1d-4b9a-9e55-2f1d8c7a6b5e",
            additional_claims={"email": "ada@university.edu", "name": "Ada"},
        )
        payload = decode_token(token)

        assert payload["sub"] == "0b6f4a7e-3c1d-4b9a-9e55-2f1d8c7a6b5e"
        assert payload["email"] == "ada@university.edu"
        assert payload["name"] == "Ada"
        assert payload["type"] == ACCESS_TOKEN_TYPE

    def test_token_is_valid_for_24_hours(self):
        payload = decode_token(create_access_token(subject="x"))
        assert payload["exp"] - payload["iat"] == 24 * 60 * 60

    def test_expired_token_is_rejected(self):
        token = create_access_token(subject="x", expires_delta=timedelta(seconds=-5))
        assert decode_token(token) is None

    def test_tampered_token_is_rejected(self):
        token = create_access_token(subject="x")
        header, payload, signature = token.split(".")
        first = "B" if signature[0] == "A" else "A"
        tampered = f"{header}.{payload}.{first}{signature[1:]}"
        assert decode_token(tampered) is None

    def test_token_signed_with_other_key_is_rejected(self):
        forged = jwt.encode({"sub": "x", "type": "access"}, "other-key", algorithm="HS256")
        assert decode_token(forged) is None

    def test_token_uses_configured_algorithm(self):
        token = create_access_token(subject="x")
        assert jwt.get_unverified_header(token)["alg"] == settings.jwt_algorithm
