"""
Use-cases: credential sign-up and log-in.
Depends only on Domain ports and entities — no infrastructure imports.
"""

import logging
import time
import uuid

from src.domain.entities.user import User
from src.domain.exceptions import InvalidCredentialsError, UserExistsError
from src.domain.ports.password_hasher_port import IPasswordHasher
from src.domain.ports.token_service_port import ITokenService
from src.domain.ports.user_repository_port import IUserRepository

logger = logging.getLogger(__name__)


class SignUpUseCase:
    MIN_PASSWORD_LENGTH: int = 6
    # bcrypt only reads the first 72 bytes.
    MAX_PASSWORD_BYTES: int = 72

    def __init__(self, users: IUserRepository, hasher: IPasswordHasher) -> None:
        self._users = users
        self._hasher = hasher

    def execute(self, email: str, password: str) -> User:
        """Register a new account.

        Raises:
            ValueError: if email or password is missing, or the password is too
                        short or longer than 72 bytes.
            UserExistsError: if the email is already registered.
        """
        if not email or not email.strip() or not password:
            raise ValueError("Email and password are required")
        if len(password) < self.MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"Password must be at least {self.MIN_PASSWORD_LENGTH} characters"
            )
        if len(password.encode("utf-8")) > self.MAX_PASSWORD_BYTES:
            raise ValueError(
                f"Password must be at most {self.MAX_PASSWORD_BYTES} bytes"
            )
        email = email.strip().lower()
        if self._users.get_by_email(email) is not None:
            raise UserExistsError("Email already registered")

        user = User(
            id=uuid.uuid4().hex,
            email=email,
            password_hash=self._hasher.hash(password),
            created_at=int(time.time() * 1000),
        )
        self._users.add(user)
        logger.info("Registered user %s", user.id)
        return user


class LogInUseCase:
    def __init__(
        self,
        users: IUserRepository,
        hasher: IPasswordHasher,
        tokens: ITokenService,
    ) -> None:
        self._users = users
        self._hasher = hasher
        self._tokens = tokens

    def execute(self, email: str, password: str) -> str:
        """Verify credentials and return a signed bearer token.

        Raises:
            InvalidCredentialsError: on unknown email or wrong password.
        """
        user = self._users.get_by_email((email or "").strip().lower())
        if user is None or not self._hasher.verify(password or "", user.password_hash):
            logger.info("Rejected login for %s", email)
            raise InvalidCredentialsError("Invalid email or password")
        return self._tokens.issue(user.id, {"email": user.email})
