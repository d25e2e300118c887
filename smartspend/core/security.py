# Standard library imports
import time
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import Settings
from .exceptions import AuthenticationError


DEFAULT_BCRYPT_ROUNDS = 12


def hash_password(plain_password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash
        rounds: bcrypt cost factor

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


class TokenService:
    """
    Issues and verifies signed, time-limited identity tokens (JWT).

    Tokens are self-contained: the subject claim carries the user ID, and
    expiry is the only way a token stops being valid.
    """

    def __init__(self, settings: Settings) -> None:
        self.secret_key = settings.jwt_secret_key
        self.algorithm = settings.jwt_algorithm
        self.expires_in_seconds = settings.access_token_expire_minutes * 60

    def issue(self, identity: str, issued_at: Optional[int] = None) -> str:
        """
        Create a JWT token for a user with expiration

        Args:
            identity: User ID stored in the "sub" claim
            issued_at: Issue time as a UNIX timestamp (defaults to now)

        Returns:
            Encoded JWT token string
        """
        if not identity:
            raise ValueError("Cannot issue a token without an identity")

        if issued_at is None:
            issued_at = int(time.time())

        token_payload: Dict[str, Any] = {
            "sub": identity,
            "iat": issued_at,
            "exp": issued_at + self.expires_in_seconds,
        }
        return jwt.encode(token_payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        """
        Decode and validate a JWT token

        Args:
            token: The JWT token string to decode

        Returns:
            The user ID the token was issued for

        Raises:
            AuthenticationError: If the token is malformed, tampered with or expired
        """
        if not token:
            raise AuthenticationError("Empty token", user_message="Token is invalid or expired")

        try:
            decoded = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": ["sub", "exp"]},
            )
        except InvalidTokenError as e:
            raise AuthenticationError(
                f"Invalid token: {str(e)}",
                user_message="Token is invalid or expired",
            )

        identity = decoded.get("sub")
        if not isinstance(identity, str) or not identity:
            raise AuthenticationError(
                "Invalid authentication payload: missing user ID",
                user_message="Token is invalid or expired",
            )
        return identity
