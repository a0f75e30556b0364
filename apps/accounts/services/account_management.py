"""Account management service: profile read, update, listing and deletion."""

import logging
from uuid import UUID

from django.db import transaction
from django.contrib.auth import get_user_model

from .. import validators
from ..models import UserRole
from .exceptions import (
    AccountsServiceError,
    BusinessRuleError,
    InputError,
    ResourceNotFoundError,
    ServerError,
)
from .password_hashing import hash_password
from .profile_images import resolve_profile_image_url

logger = logging.getLogger(__name__)

User = get_user_model()


def profile_projection(user) -> dict:
    """Public view of a user record; optional fields default to None."""
    return {
        'id': str(user.id),
        'name': user.name,
        'phone_number': user.phone_number or None,
        'email': user.email,
        'address': user.address or None,
        'address_detail': user.address_detail or None,
        'role': user.role,
        'profile_image': resolve_profile_image_url(user.profile_image),
    }


def get_profile(*, user_id: UUID) -> dict:
    """
    Get a user's profile.

    Raises:
        ResourceNotFoundError: If user does not exist
        ServerError: On any unexpected failure (cause is logged)
    """
    try:
        user = User.objects.get(id=user_id)
        return profile_projection(user)
    except User.DoesNotExist:
        raise ResourceNotFoundError("No account matches this id.")
    except Exception:
        logger.exception("Error reading profile %s", user_id)
        raise ServerError("An error occurred while reading the profile.")


@transaction.atomic
def update_profile(
    *,
    current_email: str,
    email: str,
    address: str = None,
    address_detail: str = None,
    password: str = None
) -> dict:
    """
    Update the address and, optionally, the password of a user.

    Name and phone number are never changed here, and the role is reset
    to ``user`` so accounts cannot escalate themselves.

    Args:
        current_email: Email of the authenticated caller
        email: Email asserted in the request; must equal the stored email
        address: New shipping address, or None to keep the current one
        address_detail: New address detail, or None to keep the current one
        password: New plain password, or None to keep the current one

    Returns:
        Updated profile projection

    Raises:
        ResourceNotFoundError: If the caller's account does not exist
        BusinessRuleError: If the requested email differs from the stored one
        InputError: If the new password or an address fails validation
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(email=current_email)
        )
    except User.DoesNotExist:
        raise ResourceNotFoundError("No account registered with this email.")

    if email != user.email:
        raise BusinessRuleError("Email cannot be changed.")

    if not validators.is_valid_address(address):
        raise InputError("Address must be at most 255 characters.")
    if not validators.is_valid_address(address_detail):
        raise InputError("Address detail must be at most 255 characters.")

    user.role = UserRole.USER
    update_fields = ['role', 'updated_at']

    if address is not None:
        user.address = address
        update_fields.append('address')

    if address_detail is not None:
        user.address_detail = address_detail
        update_fields.append('address_detail')

    if password:
        if not validators.is_valid_password(password):
            raise InputError(
                "Password must be 8-16 characters of letters, digits and special characters."
            )
        user.password = hash_password(password)
        update_fields.append('password')

    user.save(update_fields=update_fields)
    return profile_projection(user)


def get_all_profiles() -> list:
    """
    List every user (admin only).

    Raises:
        ResourceNotFoundError: If there are no users
        ServerError: On any unexpected failure (cause is logged)
    """
    try:
        users = list(User.objects.order_by('created_at'))
        if not users:
            raise ResourceNotFoundError("No user profiles found.")
        return [profile_projection(user) for user in users]
    except AccountsServiceError:
        raise
    except Exception:
        logger.exception("Error listing profiles")
        raise ServerError("An error occurred while reading profiles.")


@transaction.atomic
def delete_profile(*, user_id: UUID) -> dict:
    """
    Delete exactly one user.

    Returns:
        Profile projection as it was before deletion

    Raises:
        ResourceNotFoundError: If user does not exist
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(id=user_id)
        )
    except User.DoesNotExist:
        raise ResourceNotFoundError("No account matches this id.")

    snapshot = profile_projection(user)
    user.delete()

    logger.info("Deleted user %s", user_id)
    return snapshot
