"""
Port (interface) for user account persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.user import User


class IUserRepository(ABC):
    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]: ...

    @abstractmethod
    def add(self, user: User) -> None:
        """Persist a new user.

        Raises:
            UserExistsError: if the email is already registered.
        """
        ...
