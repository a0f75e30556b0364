"""
JWT issuing and verification service.

Tokens are signed with SIMPLE_JWT['SIGNING_KEY'] and carry the user's
id (SIMPLE_JWT['USER_ID_CLAIM']) and role.
"""

from typing import NamedTuple

from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken, RefreshToken

from .exceptions import InvalidTokenError

ROLE_CLAIM = 'role'


class TokenPair(NamedTuple):
    access: str
    refresh: str


def _with_role(token, user):
    token[ROLE_CLAIM] = user.role
    return token


def issue_access_token(user) -> str:
    """Short-lived token used on every authenticated request."""
    return str(_with_role(AccessToken.for_user(user), user))


def issue_refresh_token(user) -> str:
    """Longer-lived token used only to obtain new access tokens."""
    return str(_with_role(RefreshToken.for_user(user), user))


def issue_token_pair(user) -> TokenPair:
    return TokenPair(
        access=issue_access_token(user),
        refresh=issue_refresh_token(user),
    )


def verify_access_token(token: str) -> dict:
    """
    Validate signature, expiry and token type of an access token.

    Returns:
        Token claims

    Raises:
        InvalidTokenError: If the token cannot be trusted
    """
    return _verify(AccessToken, token)


def verify_refresh_token(token: str) -> dict:
    return _verify(RefreshToken, token)


def user_id_from_claims(claims: dict):
    try:
        return claims[api_settings.USER_ID_CLAIM]
    except KeyError:
        raise InvalidTokenError("Token contains no user identifier")


def read_bearer_token(authorization) -> str:
    """
    Extract the raw token from an ``Authorization: Bearer <token>`` header.

    Raises:
        InvalidTokenError: If the header is missing or not a bearer header
    """
    if not authorization:
        raise InvalidTokenError("Authorization header missing")

    parts = authorization.split()
    if len(parts) != 2 or parts[0] not in api_settings.AUTH_HEADER_TYPES:
        raise InvalidTokenError("Authorization header must be 'Bearer <token>'")

    return parts[1]


def _verify(token_class, token) -> dict:
    if not token or not isinstance(token, str):
        raise InvalidTokenError()
    try:
        validated = token_class(token)
    except TokenError as e:
        raise InvalidTokenError(str(e))
    return dict(validated.payload)
