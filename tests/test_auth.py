"""Tests for roost.caddy.auth — basic auth handler and password hashing."""

import pytest
from argon2 import PasswordHasher

from roost.caddy.auth import get_auth_handler, hash_password

BCRYPT_HASH = "$2a$14$Zkx19XLiW6VYouLHR5NmfOFU0z2GTNmpkT/5qqR7hx4IjWJPDhjvG"


class TestHashPassword:
    def test_plaintext_hashed_with_argon2id(self) -> None:
        algorithm, hashed = hash_password("s3cr3t")

        assert algorithm == "argon2id"
        assert hashed.startswith("$argon2id$")
        assert PasswordHasher().verify(hashed, "s3cr3t")

    def test_plaintext_hash_is_salted(self) -> None:
        assert hash_password("s3cr3t")[1] != hash_password("s3cr3t")[1]

    def test_argon2_hash_passed_through(self) -> None:
        stored = PasswordHasher().hash("s3cr3t")
        assert hash_password(stored) == ("argon2id", stored)

    @pytest.mark.parametrize(
        "stored",
        [
            "$argon2i$v=19$m=65536,t=3,p=4$c2FsdHNhbHQ$aGFzaGhhc2g",
            "$argon2d$v=19$m=65536,t=3,p=4$c2FsdHNhbHQ$aGFzaGhhc2g",
        ],
    )
    def test_other_argon2_variants_rejected(self, stored: str) -> None:
        with pytest.raises(ValueError, match="only argon2id"):
            hash_password(stored)

    def test_bcrypt_hash_passed_through(self) -> None:
        assert hash_password(BCRYPT_HASH) == ("bcrypt", BCRYPT_HASH)

    def test_empty_password_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            hash_password("")


class TestAuthHandler:
    def test_shape(self) -> None:
        handler = get_auth_handler(BCRYPT_HASH, username="guest", realm="preview")

        assert handler == {
            "handler": "authentication",
            "providers": {
                "http_basic": {
                    "hash": {"algorithm": "bcrypt"},
                    "accounts": [{"username": "guest", "password": BCRYPT_HASH}],
                    "realm": "preview",
                },
            },
        }

    def test_defaults(self) -> None:
        basic = get_auth_handler("s3cr3t")["providers"]["http_basic"]

        assert basic["accounts"][0]["username"] == "user"
        assert basic["realm"] == "restricted"
        assert PasswordHasher().verify(basic["accounts"][0]["password"], "s3cr3t")
