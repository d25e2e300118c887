# Standard library imports
from dataclasses import dataclass
from typing import Optional

# External package imports
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...core.exceptions import AuthenticationError
from ...core.security import TokenService
from ...di.container import get_container


# auto_error=False so a missing header goes through our own 401 handler
security_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentIdentity:
    """The authenticated requester, as carried by their token"""
    user_id: str


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> CurrentIdentity:
    """
    FastAPI dependency that authenticates the request from its bearer token

    The token is self-contained, so no database lookup happens here.

    Args:
        credentials: HTTP Bearer token credentials (None if the header is missing)

    Returns:
        CurrentIdentity of the requester

    Raises:
        AuthenticationError: If the token is missing, invalid or expired
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError(
            "Missing bearer token",
            user_message="No token provided, authorization denied",
        )

    token_service = get_container().get(TokenService)
    user_id = token_service.verify(credentials.credentials)
    return CurrentIdentity(user_id=user_id)
