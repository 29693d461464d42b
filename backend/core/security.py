"""
Password hashing and access token handling.

Passwords are stored as salted scrypt digests. Access tokens are signed
JWTs carrying the user id (``sub``) and role.

Dependencies: hashlib (stdlib), jwt (PyJWT), backend.configs
System role: Credential primitives for the auth service and API deps
"""

import hashlib
import hmac
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from backend.configs import get_settings
from backend.core.exceptions import AuthenticationError

_SCRYPT_N = 2**14
_SCRYPT_R = 8
_SCRYPT_P = 1
_SALT_BYTES = 16


def hash_password(password: str) -> str:
    """
    Hash a plaintext password.

    Args:
        password: Plaintext password

    Returns:
        str: ``scrypt$<salt hex>$<digest hex>``
    """
    salt = secrets.token_bytes(_SALT_BYTES)
    digest = hashlib.scrypt(
        password.encode("utf-8"), salt=salt, n=_SCRYPT_N, r=_SCRYPT_R, p=_SCRYPT_P
    )
    return f"scrypt${salt.hex()}${digest.hex()}"


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored hash."""
    try:
        scheme, salt_hex, digest_hex = password_hash.split("$")
    except ValueError:
        return False
    if scheme != "scrypt":
        return False

    candidate = hashlib.scrypt(
        password.encode("utf-8"),
        salt=bytes.fromhex(salt_hex),
        n=_SCRYPT_N,
        r=_SCRYPT_R,
        p=_SCRYPT_P,
    )
    return hmac.compare_digest(candidate.hex(), digest_hex)


def create_access_token(subject: str, role: str, expires_minutes: int | None = None) -> str:
    """
    Issue a signed access token.

    Args:
        subject: User ID placed in the ``sub`` claim
        role: User role placed in the ``role`` claim
        expires_minutes: Lifetime override (defaults to settings)

    Returns:
        str: Encoded JWT
    """
    auth = get_settings().auth
    lifetime = expires_minutes if expires_minutes is not None else auth.access_token_expire_minutes
    now = datetime.now(timezone.utc)
    payload = {
        "sub": subject,
        "role": role,
        "iat": now,
        "exp": now + timedelta(minutes=lifetime),
    }
    return jwt.encode(payload, auth.secret_key, algorithm=auth.algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Verify and decode an access token.

    Raises:
        AuthenticationError: Signature invalid, token expired or ``sub`` missing
    """
    auth = get_settings().auth
    try:
        payload = jwt.decode(token, auth.secret_key, algorithms=[auth.algorithm])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except jwt.InvalidTokenError:
        raise AuthenticationError("Invalid or expired token")

    if not payload.get("sub"):
        raise AuthenticationError("Invalid token: no user ID found")
    return payload
