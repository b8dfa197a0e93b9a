"""
Infrastructure adapter: bcrypt → IPasswordHasher.
"""

import bcrypt

from src.domain.ports.password_hasher_port import IPasswordHasher

# bcrypt ignores (4.x) or rejects (5.x) anything past this.
MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(IPasswordHasher):
    def __init__(self, rounds: int = 10) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(encoded, salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, hashed.encode("utf-8"))
        except ValueError:
            # Malformed stored hash.
            return False
