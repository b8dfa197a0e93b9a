"""
Port (interface) for bearer-token issuers/validators.
Infrastructure adapters (e.g. JWTTokenService) must implement this interface.
"""

from abc import ABC, abstractmethod


class ITokenService(ABC):
    @abstractmethod
    def issue(self, subject: str, claims: dict | None = None) -> str:
        """Sign and return a token for *subject* carrying the extra *claims*."""
        ...

    @abstractmethod
    def validate(self, token: str) -> dict:
        """Validate a token and return its decoded claims.

        Raises:
            ValueError: if the token is malformed, expired, or badly signed.
        """
        ...
