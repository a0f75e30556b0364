"""Password change service."""

from django.db import transaction
from django.contrib.auth import get_user_model

from .. import validators
from .exceptions import InputError, ResourceNotFoundError
from .password_hashing import hash_password

User = get_user_model()

PASSWORD_CHANGED_MESSAGE = "Password has been changed."


@transaction.atomic
def change_password(*, email: str, new_password: str, new_password_confirm: str) -> str:
    """
    Replace a user's password.

    Format and confirmation are checked before the store is touched.

    Returns:
        Confirmation message

    Raises:
        InputError: If the new password is malformed or not confirmed
        ResourceNotFoundError: If no user has this email
    """
    if not validators.is_valid_password(new_password):
        raise InputError("New password format is invalid.")

    if new_password != new_password_confirm:
        raise InputError("New passwords do not match.")

    try:
        user = (
            User.objects
            .select_for_update()
            .get(email=email)
        )
    except User.DoesNotExist:
        raise ResourceNotFoundError("No account registered with this email.")

    user.password = hash_password(new_password)
    user.save(update_fields=['password', 'updated_at'])

    return PASSWORD_CHANGED_MESSAGE
