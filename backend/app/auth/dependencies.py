"""
Authentication dependencies for FastAPI routes.

Credential checks and token issuance belong to the authentication service.
This module only verifies the bearer token it issued and yields the
principal identifier (user id). Supports both:
- Bearer token in Authorization header (for API clients)
- HttpOnly cookie (for browser-based frontends)
"""

from fastapi import Cookie, Depends
from fastapi.security import OAuth2PasswordBearer

from core.exceptions import Unauthenticated
from core.logging import bind_context
from core.security import principal_from_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="token", auto_error=False)


def get_token_from_request(
    token_header: str | None = Depends(oauth2_scheme),
    access_token_cookie: str | None = Cookie(None, alias="access_token"),
) -> str:
    """
    Extract JWT token from request.

    Checks in order:
    1. Authorization header (Bearer token)
    2. HttpOnly cookie (access_token)
    """
    if token_header:
        return token_header

    if access_token_cookie:
        return access_token_cookie

    raise Unauthenticated("Not authenticated")


def get_current_principal(token: str = Depends(get_token_from_request)) -> int:
    """
    Resolve the authenticated principal identifier.

    Whether a user row exists is checked by the service layer; a verified
    token without a user is a server-side fault, not a 401.
    """
    try:
        user_id = principal_from_token(token)
    except ValueError:
        raise Unauthenticated("Invalid authentication credentials") from None

    bind_context(user_id=user_id)
    return user_id
