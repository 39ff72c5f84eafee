"""
Name: Password Hashing (Argon2)

Responsibilities:
  - Hash passwords with a slow, salted one-way function
  - Verify a plaintext password against a stored hash

Constraints:
  - Cost parameters are fixed for the process (PasswordHasher defaults)
  - Plaintext passwords are never logged or persisted
"""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

_password_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """R: Hash a password using Argon2 (random salt per call)."""
    return _password_hasher.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """R: Verify password against stored hash."""
    try:
        return _password_hasher.verify(password_hash, password)
    except (VerifyMismatchError, VerificationError, InvalidHashError):
        return False
