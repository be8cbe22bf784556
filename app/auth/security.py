import hashlib
import secrets
from datetime import datetime, timedelta, timezone
from functools import lru_cache

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerifyMismatchError

# Password hashing with Argon2id
ph = PasswordHasher(
    time_cost=3,
    memory_cost=65536,
    parallelism=4,
    hash_len=32,
    salt_len=16,
)


def hash_password(password: str) -> str:
    return ph.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        ph.verify(password_hash, password)
        return True
    except (VerifyMismatchError, InvalidHashError):
        return False


@lru_cache
def _dummy_hash() -> str:
    return ph.hash(secrets.token_urlsafe(16))


def burn_verify(password: str) -> bool:
    """Spend one verification on a throwaway hash and return False.

    Used for unknown usernames so they cost the same as a wrong password.
    """
    verify_password(password, _dummy_hash())
    return False


# Session token hashing
def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


def generate_token() -> str:
    return secrets.token_urlsafe(32)


def create_session_token(max_age_hours: int) -> tuple[str, str, datetime]:
    """
    Returns: (raw_token, hashed_token, expires_at)
    """
    raw_token = generate_token()
    hashed_token = hash_token(raw_token)
    expires_at = datetime.now(timezone.utc) + timedelta(hours=max_age_hours)
    return raw_token, hashed_token, expires_at
