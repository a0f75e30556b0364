"""User authentication service."""

import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import (
    AccountsServiceError,
    AuthenticationError,
    InactiveAccountError,
    InvalidCredentialsError,
    InvalidTokenError,
    ResourceNotFoundError,
)
from .password_hashing import verify_password
from .token_issuing import (
    TokenPair,
    issue_access_token,
    issue_token_pair,
    user_id_from_claims,
    verify_refresh_token,
)

logger = logging.getLogger(__name__)

User = get_user_model()


def sign_in(*, email: str, password: str) -> TokenPair:
    """
    Authenticate user with email and password and issue tokens.

    Specific failures are logged; callers always get the same
    AuthenticationError so unknown emails and wrong passwords look alike.

    Returns:
        TokenPair of access and refresh tokens

    Raises:
        AuthenticationError: On any failure
    """
    try:
        return _authenticate_and_issue(email=email, password=password)
    except AccountsServiceError as e:
        logger.warning("Sign-in failed (%s): %s", e.kind, e.message)
        raise AuthenticationError()
    except Exception:
        logger.exception("Sign-in failed unexpectedly")
        raise AuthenticationError()


@transaction.atomic
def _authenticate_and_issue(*, email: str, password: str) -> TokenPair:
    # Lock the row to prevent race conditions on last_login
    try:
        user = (
            User.objects
            .select_for_update()
            .get(email=email)
        )
    except User.DoesNotExist:
        raise ResourceNotFoundError("No account registered with this email.")

    if not verify_password(password, user.password):
        raise InvalidCredentialsError("Password does not match.")

    if not user.is_active:
        raise InactiveAccountError()

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    tokens = issue_token_pair(user)
    logger.info("User %s signed in", user.id)
    return tokens


def refresh_access_token(*, refresh_token: str) -> str:
    """
    Issue a new access token from a verified refresh token.

    The user named in the token must still exist and be active.

    Raises:
        AuthenticationError: If the token or its user cannot be trusted
    """
    try:
        claims = verify_refresh_token(refresh_token)
        user_id = user_id_from_claims(claims)
        user = User.objects.filter(id=user_id, is_active=True).first()
    except InvalidTokenError as e:
        logger.warning("Token refresh rejected: %s", e.message)
        raise AuthenticationError("Refresh token is invalid or expired.")
    except (ValidationError, ValueError, TypeError) as e:
        # Malformed id claim
        logger.warning("Token refresh rejected: %s", e)
        raise AuthenticationError("Refresh token is invalid or expired.")

    if user is None:
        logger.warning("Token refresh for unknown or inactive user %s", user_id)
        raise AuthenticationError("Account no longer exists.")

    return issue_access_token(user)
