"""
Infrastructure adapter: python-jose HS256 JWTs → ITokenService.

Tokens are issued by the log-in use case and validated on every dashboard
request. The signing secret comes from Settings.AUTH_SECRET_KEY.
"""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from src.domain.ports.token_service_port import ITokenService


class JWTTokenService(ITokenService):
    """Signs and verifies HS256 bearer tokens with a shared secret."""

    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        ttl: timedelta = timedelta(hours=24),
        issuer: str = "stock-dashboard",
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key must be a non-empty string")
        self._secret_key = secret_key
        self._ttl = ttl
        self._issuer = issuer

    def issue(self, subject: str, claims: dict | None = None) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            **(claims or {}),
            "sub": subject,
            "iss": self._issuer,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def validate(self, token: str) -> dict:
        """Decode and validate a token issued by this service.

        Raises:
            ValueError: on any validation failure (bad signature, expiry,
                        wrong issuer, missing subject).
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                issuer=self._issuer,
            )
        except JWTError as exc:
            raise ValueError(f"Token validation failed: {exc}") from exc
        if not claims.get("sub"):
            raise ValueError("Token validation failed: missing 'sub' claim")
        return claims
