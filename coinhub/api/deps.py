"""Authorization dependencies: require_token and require_admin guard protected routes."""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from coinhub.core.security import InvalidTokenError, TokenIdentity, decode_access_token

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def require_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenIdentity:
    """
    Dependency: require a Bearer token and return the identity it carries.
    401 if no token was sent; 403 if one was sent but does not verify.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return decode_access_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.debug("Rejected bearer token: %s", e.__cause__ or e.message)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=e.message,
        ) from e


def require_admin(
    identity: Annotated[TokenIdentity, Depends(require_token)],
) -> TokenIdentity:
    """Dependency: require a verified token whose role is 'admin'. Raises 403 for non-admin."""
    # Role comes from the token snapshot: demotion or ban takes effect when the token expires.
    if identity.role != "admin":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return identity
