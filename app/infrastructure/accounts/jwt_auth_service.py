"""
Adapter: JWT token verification.

Implements the AuthService port with PyJWT and a symmetric key.
"""

import logging
from typing import Optional

import jwt

from app.domain.accounts.errors import AuthProviderError
from app.domain.accounts.ports import AuthService

logger = logging.getLogger(__name__)

USER_ID_CLAIMS = ("userId", "sub")


class JwtAuthService(AuthService):
    """Verifies HMAC-signed JWTs and extracts the user id.

    The user id is read from the ``userId`` claim, falling back to the
    standard ``sub`` claim.

    Attributes:
        secret: Symmetric key used for verification.
        algorithm: Expected signing algorithm (default: HS256).
    """

    def __init__(self, secret: str, algorithm: str = "HS256") -> None:
        self.secret = secret
        self.algorithm = algorithm

    def validate_token(self, token: str) -> Optional[str]:
        """Return the token's user id, or None if the token is not acceptable.

        Raises:
            AuthProviderError: If no key is configured or the library fails
                for a reason other than a bad token.
        """
        if not self.secret:
            raise AuthProviderError("JWT symmetric key is not configured")

        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired auth token")
            return None
        except jwt.InvalidTokenError as exc:
            logger.info("Rejected invalid auth token: %s", type(exc).__name__)
            return None
        except Exception as exc:
            raise AuthProviderError(type(exc).__name__) from exc

        for claim in USER_ID_CLAIMS:
            user_id = payload.get(claim)
            if isinstance(user_id, str) and user_id:
                return user_id

        logger.info("Rejected auth token without a subject")
        return None
