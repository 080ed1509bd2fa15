"""
Owner password hashing.

Hashes are bcrypt through passlib; only ``UserService`` calls these helpers
and only ``UserRepository`` stores the result.
"""

import logging

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

password_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return password_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check a sign-in attempt; an unreadable stored hash counts as a mismatch."""
    try:
        return password_context.verify(password, password_hash)
    except ValueError:
        logger.warning(
            "Stored password hash could not be parsed",
            extra={"context": {"component": "security"}},
        )
        return False
