"""Signed bearer token issuance and verification."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from roster_api.config import Settings
from roster_api.exceptions import ConfigurationError, TokenExpiredError, TokenInvalidError


class TokenService:
    """Issues and verifies stateless JWT access tokens.

    Tokens carry the account id and email and expire a fixed number of hours
    after issuance. There is no server-side session table, so a token stays
    valid until it expires or the signing secret changes.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expiration_hours: int = 3,
    ) -> None:
        """Initialize the service with its signing configuration.

        Args:
            secret: Signing secret shared by every process of the deployment
            algorithm: JWT signing algorithm
            expiration_hours: Token lifetime in hours

        Raises:
            ConfigurationError: If the secret is empty or the lifetime is not positive
        """
        if not secret:
            raise ConfigurationError("JWT secret is not configured")
        if expiration_hours <= 0:
            raise ConfigurationError("JWT expiration must be a positive number of hours")
        self._secret = secret
        self.algorithm = algorithm
        self.expiration = timedelta(hours=expiration_hours)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        """Build a token service from application settings."""
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expiration_hours=settings.jwt_expiration_hours,
        )

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds."""
        return int(self.expiration.total_seconds())

    def issue(self, subject_id: UUID, subject_email: str, now: datetime | None = None) -> str:
        """Create a signed access token.

        Args:
            subject_id: Account UUID
            subject_email: Account email
            now: Issuance time (defaults to the current UTC time)

        Returns:
            JWT token string
        """
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "userId": str(subject_id),
            "email": subject_email,
            "iat": issued_at,
            "exp": issued_at + self.expiration,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def decode(self, token: str) -> dict:
        """Decode and verify a token, returning its payload.

        Raises:
            TokenExpiredError: If the token is past its expiry
            TokenInvalidError: If the signature or structure is invalid
        """
        try:
            return jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except JWTError as e:
            raise TokenInvalidError("Token is invalid") from e

    def verify(self, token: str) -> UUID:
        """Verify a token and return the subject's account id.

        Args:
            token: JWT token string

        Returns:
            Account UUID embedded in the token

        Raises:
            TokenExpiredError: If the token is past its expiry
            TokenInvalidError: If the token is malformed, tampered with, or has no subject
        """
        payload = self.decode(token)
        subject = payload.get("userId")
        if not isinstance(subject, str):
            raise TokenInvalidError("Token has no subject")
        try:
            return UUID(subject)
        except ValueError as e:
            raise TokenInvalidError("Token subject is not a valid id") from e
