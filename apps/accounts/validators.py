"""
Format rules for sign-up and profile fields.

All predicates are pure and return a bool; they never raise.
"""
import re

from django.core.exceptions import ValidationError
from django.core.validators import EmailValidator


NAME_PATTERN = re.compile(r'[가-힣A-Za-z]+(?: [가-힣A-Za-z]+)*')
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 20

PHONE_NUMBER_PATTERN = re.compile(r'01[016789]-?[0-9]{3,4}-?[0-9]{4}')

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 16
PASSWORD_SPECIAL_CHARACTERS = '!@#$%^&*()_+-=[]{};:\'",.<>/?\\|`~'
PASSWORD_ALLOWED_PATTERN = re.compile(
    r'[A-Za-z0-9' + re.escape(PASSWORD_SPECIAL_CHARACTERS) + r']+'
)

EMAIL_MAX_LENGTH = 255
ADDRESS_MAX_LENGTH = 255

_email_validator = EmailValidator()


def is_valid_name(name) -> bool:
    """Hangul or Latin letters, single spaces between words, 2-20 chars."""
    if not isinstance(name, str):
        return False
    if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        return False
    return NAME_PATTERN.fullmatch(name) is not None


def is_valid_phone_number(phone_number) -> bool:
    """Korean mobile number, e.g. 010-1234-5678 or 01012345678."""
    if not isinstance(phone_number, str):
        return False
    return PHONE_NUMBER_PATTERN.fullmatch(phone_number) is not None


def is_valid_email(email) -> bool:
    if not isinstance(email, str) or not email:
        return False
    if len(email) > EMAIL_MAX_LENGTH:
        return False
    try:
        _email_validator(email)
    except ValidationError:
        return False
    return True


def is_valid_password(password) -> bool:
    """
    8-16 characters drawn from letters, digits and special characters,
    with at least one of each class.
    """
    if not isinstance(password, str):
        return False
    if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
        return False
    if PASSWORD_ALLOWED_PATTERN.fullmatch(password) is None:
        return False

    has_letter = any(c.isascii() and c.isalpha() for c in password)
    has_digit = any(c.isdigit() for c in password)
    has_special = any(c in PASSWORD_SPECIAL_CHARACTERS for c in password)
    return has_letter and has_digit and has_special


def is_valid_address(address) -> bool:
    """Optional free text; blank is allowed, up to 255 chars."""
    if address is None:
        return True
    return isinstance(address, str) and len(address) <= ADDRESS_MAX_LENGTH
