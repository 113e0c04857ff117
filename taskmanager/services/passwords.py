"""Password hashing."""

from passlib.context import CryptContext

DEFAULT_BCRYPT_ROUNDS = 12


class PasswordHasher:
    """One-way bcrypt hashing with constant-time verification."""

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        """Hash a password with a fresh random salt."""
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against its hash. Malformed hashes never verify."""
        try:
            return self._context.verify(password, password_hash)
        except (ValueError, TypeError):
            return False
