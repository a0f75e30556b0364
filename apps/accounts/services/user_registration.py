"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from .. import validators
from ..models import UserRole
from .exceptions import InputError, ConflictError
from .password_hashing import hash_password

logger = logging.getLogger(__name__)

User = get_user_model()

# Checked in this order; the first failing field is reported
FIELD_RULES = (
    ('name', validators.is_valid_name, "Name format is invalid."),
    ('phone_number', validators.is_valid_phone_number, "Phone number format is invalid."),
    ('email', validators.is_valid_email, "Email format is invalid."),
    (
        'password',
        validators.is_valid_password,
        "Password must be 8-16 characters of letters, digits and special characters.",
    ),
    ('address', validators.is_valid_address, "Address must be at most 255 characters."),
    ('address_detail', validators.is_valid_address, "Address detail must be at most 255 characters."),
)


def validate_sign_up_fields(**fields) -> None:
    """
    Raises:
        InputError: For the first field that fails its format rule
    """
    for field, is_valid, message in FIELD_RULES:
        if not is_valid(fields.get(field)):
            raise InputError(message)


@transaction.atomic
def sign_up(
    *,
    name: str,
    phone_number: str,
    email: str,
    password: str,
    address: str = "",
    address_detail: str = ""
) -> User:
    """
    Register a new user.

    Args:
        name: Customer name
        phone_number: Mobile phone number
        email: Login email, unique across users
        password: Plain password (will be hashed)
        address: Shipping address
        address_detail: Apartment, floor, etc.

    Returns:
        Created User instance with role ``user``

    Raises:
        InputError: If a field fails validation
        ConflictError: If the email is already registered
    """
    validate_sign_up_fields(
        name=name,
        phone_number=phone_number,
        email=email,
        password=password,
        address=address,
        address_detail=address_detail,
    )

    if User.objects.filter(email=email).exists():
        raise ConflictError("This email is already registered.")

    # The unique constraint on email is authoritative for concurrent sign-ups
    try:
        with transaction.atomic():
            user = User.objects.create(
                name=name,
                phone_number=phone_number,
                email=email,
                password=hash_password(password),
                address=address,
                address_detail=address_detail,
                role=UserRole.USER,
            )
    except IntegrityError:
        raise ConflictError("This email is already registered.")

    logger.info("Registered user %s", user.id)
    return user
