# app/core/dependencies.py
import logging

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.security import TokenVerifier
from app.database import get_db

logger = logging.getLogger(__name__)

security = HTTPBearer()
auth = TokenVerifier()

__all__ = ["get_db", "validate_token", "get_current_identity"]


async def validate_token(token: HTTPAuthorizationCredentials = Depends(security)) -> dict:
    """Validate and decode the bearer token.

    Returns:
        dict: Decoded token payload

    Raises:
        HTTPException: If token is missing, invalid or expired
    """
    if not token or not token.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication token is required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return auth.verify_token(token.credentials)
    except HTTPException:
        raise
    except Exception as e:
        logger.error("Token validation error: %s", str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication failed",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


async def get_current_identity(request: Request, payload: dict = Depends(validate_token)) -> str:
    """Resolve the caller's identity from the token payload.

    The identity is an opaque string; services look the user up by it and
    treat an unknown identity exactly like a missing resource.

    Raises:
        HTTPException: If the payload carries no identity claim
    """
    identity = auth.identity_from_payload(payload)
    if not identity:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload - missing identity",
        )

    # Add identity to request state for logging
    request.state.identity = identity
    return identity
