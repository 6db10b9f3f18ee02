"""Security related functions."""

import jwt
from fastapi import HTTPException, status
from jwt import InvalidTokenError

from app.core.config import settings


class TokenVerifier:
    """
    Verifies bearer tokens issued by the identity provider.

    Token issuance lives outside this service; this class only checks the
    signature and expiry of an incoming JWT and extracts the stable identity
    the rest of the application works with.

    :ivar secret_key: The shared secret used to verify token signatures.
    :type secret_key: str
    :ivar algorithm: The signing algorithm accepted.
    :type algorithm: str
    """

    def __init__(self, secret_key: str | None = None, algorithm: str | None = None):
        self.secret_key = secret_key or settings.secret_key
        self.algorithm = algorithm or settings.algorithm

    def verify_token(self, token: str) -> dict:
        """
        Decode and validate a JSON Web Token. If the token is invalid or
        expired, raises an HTTPException with a 401 status code.

        :param token: The JWT token to be verified.
        :return: The decoded payload of the token.
        """
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except InvalidTokenError as e:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=f"Invalid authentication token: {str(e)}",
                headers={"WWW-Authenticate": "Bearer"},
            ) from e

    @staticmethod
    def identity_from_payload(payload: dict) -> str | None:
        """Return the identity claim of a decoded token, if present."""
        identity = payload.get(settings.identity_claim) or payload.get("sub")
        return str(identity) if identity else None
