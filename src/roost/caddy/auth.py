"""HTTP basic authentication handler for password-protected branches.

Caddy's ``http_basic`` provider compares credentials against a stored
hash, never a plaintext password:

1. **argon2id** (``$argon2id$...``): passed through as stored; other
   argon2 variants (``$argon2i$``, ``$argon2d$``) are rejected
2. **bcrypt** (``$2a$`` / ``$2b$`` / ``$2y$``): passed through as stored
3. anything else is treated as plaintext and hashed with argon2id
   via ``argon2-cffi``

Plaintext hashing uses a random salt, so two compilations of the same
site differ in the hash while both verify the same password.

Usage::

    from roost.caddy.auth import get_auth_handler

    handler = get_auth_handler("s3cr3t", username="user", realm="restricted")
"""

from typing import Any

from argon2 import PasswordHasher

_ARGON2_PREFIX = "$argon2"
_ARGON2ID_PREFIX = "$argon2id$"
_BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


def hash_password(password: str) -> tuple[str, str]:
    """Return ``(algorithm, hash)`` for Caddy's ``http_basic`` provider.

    Args:
        password: A stored hash or a plaintext password.

    Returns:
        The Caddy hash algorithm name and the hash string.

    Raises:
        ValueError: If *password* is empty, or is an argon2i or argon2d
            hash, which Caddy cannot verify.
    """
    if not password:
        msg = "Password must not be empty."
        raise ValueError(msg)

    if password.startswith(_ARGON2_PREFIX):
        if not password.startswith(_ARGON2ID_PREFIX):
            msg = f"Unsupported argon2 variant: {password[:10]}... (only argon2id is accepted)"
            raise ValueError(msg)
        return "argon2id", password
    if password.startswith(_BCRYPT_PREFIXES):
        return "bcrypt", password
    return "argon2id", PasswordHasher().hash(password)


def get_auth_handler(
    password: str, *, username: str = "user", realm: str = "restricted"
) -> dict[str, Any]:
    """``authentication`` handler that answers 401 on missing or bad credentials.

    Successful authentication falls through to the next route in the
    enclosing subroute.
    """
    algorithm, hashed = hash_password(password)
    return {
        "handler": "authentication",
        "providers": {
            "http_basic": {
                "hash": {"algorithm": algorithm},
                "accounts": [{"username": username, "password": hashed}],
                "realm": realm,
            },
        },
    }
