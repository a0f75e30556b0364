"""Password hashing service."""

from django.contrib.auth.hashers import check_password, make_password

from ..hashers import AccountsBCryptSHA256PasswordHasher


def hash_password(plain_password: str, *, cost: int = None) -> str:
    """
    Hash a password with salted bcrypt-SHA256.

    Args:
        plain_password: Password as entered by the user
        cost: bcrypt work factor; defaults to ACCOUNTS['PASSWORD_HASH_COST']

    Returns:
        Encoded hash in Django's ``algorithm$...`` format
    """
    return make_password(plain_password, hasher=AccountsBCryptSHA256PasswordHasher(rounds=cost))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a password against a stored hash.

    Malformed, empty or unknown-algorithm hashes fail closed and return False.
    """
    if not plain_password or not hashed_password:
        return False
    try:
        return check_password(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False
