"""bcrypt based password hashing."""

import logging
from typing import Optional

import bcrypt

from src.common.config.settings import settings

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Hashes and verifies user passwords with an adaptive bcrypt cost factor."""

    def __init__(self, rounds: Optional[int] = None) -> None:
        self.rounds = rounds if rounds is not None else settings.PASSWORD_HASH_ROUNDS

    def hash(self, plain_text_password: Optional[str]) -> str:
        """Returns a salted bcrypt hash; every call uses a fresh salt."""
        if not plain_text_password or not plain_text_password.strip():
            raise ValueError("Password cannot be null or empty")

        hashed = bcrypt.hashpw(plain_text_password.encode("utf-8"), bcrypt.gensalt(rounds=self.rounds))
        return hashed.decode("utf-8")

    def verify(self, plain_text_password: Optional[str], hashed_password: Optional[str]) -> bool:
        """Checks a password against a stored hash. Malformed hashes never match."""
        if plain_text_password is None or hashed_password is None:
            return False

        try:
            return bcrypt.checkpw(plain_text_password.encode("utf-8"), hashed_password.encode("utf-8"))
        except ValueError:
            logger.warning("Stored password hash is malformed; verification refused")
            return False

    def needs_rehash(self, hashed_password: Optional[str]) -> bool:
        """True when the hash was made with a lower cost than configured, or is not a bcrypt hash."""
        if not hashed_password:
            return True

        # $2b$12$<22 char salt><31 char digest>
        parts = hashed_password.split("$")
        if len(parts) < 4 or not (parts[2].isascii() and parts[2].isdigit()):
            return True

        return int(parts[2]) < self.rounds
