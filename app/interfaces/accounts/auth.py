"""
Request authentication.

A request starts unauthenticated. The token is read from the auth cookie
and verified by the AuthService port; on success the user id is handed to
the route, otherwise the request is short-circuited before any service call:

- no cookie            -> AuthenticationError (401)
- invalid/expired token -> AuthenticationError (401)
- provider failure     -> AuthProviderError (500)
"""

import logging

from fastapi import Depends, Request

from app.core.config import settings
from app.domain.accounts.errors import AuthenticationError
from app.domain.accounts.ports import AuthService
from app.interfaces.accounts.dependencies import get_auth_service

logger = logging.getLogger(__name__)


def get_current_user_id(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
) -> str:
    """Resolve the authenticated user id for the current request."""
    token = request.cookies.get(settings.auth_cookie_name)
    if not token:
        raise AuthenticationError("No auth token provided.")

    user_id = auth_service.validate_token(token)
    if user_id is None:
        raise AuthenticationError("Invalid auth token.")

    request.state.user_id = user_id
    logger.debug("Authenticated user=%s on %s", user_id, request.url.path)
    return user_id
