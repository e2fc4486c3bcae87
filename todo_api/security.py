import hashlib
import hmac
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID
import jwt
from . import config
from .exceptions import AccessTokenDamagedException, AccessTokenExpiredException

PBKDF2_ITERATIONS = 260_000


def hash_password(password: str) -> str:
    """Hash a password for storage as ``pbkdf2_sha256$iterations$salt$hash``"""
    salt = secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), PBKDF2_ITERATIONS)
    return f"pbkdf2_sha256${PBKDF2_ITERATIONS}${salt}${digest.hex()}"


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its stored hash"""
    try:
        algorithm, iterations, salt, stored = password_hash.split("$")
    except ValueError:
        return False
    if algorithm != "pbkdf2_sha256":
        return False
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), int(iterations))
    return hmac.compare_digest(digest.hex(), stored)


def create_access_token(user_id: UUID, lifetime: Optional[int] = None) -> str:
    now = datetime.now(timezone.utc)
    lifetime = config.ACCESS_TOKEN_LIFETIME if lifetime is None else lifetime
    payload = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(seconds=lifetime),
    }
    return jwt.encode(payload, config.SECRET_KEY, algorithm=config.TOKEN_ALGORITHM)


def decode_access_token(token: str) -> UUID:
    """Return the user id carried by a valid token"""
    try:
        payload = jwt.decode(token, config.SECRET_KEY, algorithms=[config.TOKEN_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AccessTokenExpiredException()
    except jwt.InvalidTokenError:
        raise AccessTokenDamagedException()
    try:
        return UUID(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise AccessTokenDamagedException()
