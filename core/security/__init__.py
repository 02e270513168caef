"""
Security helpers.

Bearer-token verification for the authentication collaborator's tokens:
    from core.security import principal_from_token
    user_id = principal_from_token(token)
"""

from .tokens import create_access_token, decode_access_token, principal_from_token

__all__ = [
    "create_access_token",
    "decode_access_token",
    "principal_from_token",
]
