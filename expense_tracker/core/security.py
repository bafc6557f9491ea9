# File: expense_tracker/core/security.py

"""
Password hashing helpers.

Credentials are stored as salted PBKDF2-SHA256 hashes produced by
passlib. The raw password is never persisted or returned.
"""

from passlib.context import CryptContext


pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """
    Check a raw password against a stored hash.

    Malformed or foreign hashes are treated as a mismatch.
    """
    try:
        return pwd_context.verify(password, hashed)
    except (ValueError, TypeError):
        return False
