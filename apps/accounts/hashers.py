"""bcrypt password hasher whose work factor comes from ACCOUNTS settings."""

from django.contrib.auth.hashers import BCryptSHA256PasswordHasher

from .conf import accounts_settings


class AccountsBCryptSHA256PasswordHasher(BCryptSHA256PasswordHasher):
    """
    BCrypt-SHA256 with a configurable cost.

    Registered first in PASSWORD_HASHERS so `User.set_password` and
    `hash_password` share the same policy. Existing hashes with a different
    cost still verify; `must_update` flags them for re-hashing.

    Pass ``rounds`` to pin the cost for a single instance.
    """

    def __init__(self, rounds=None):
        self._rounds = rounds

    @property
    def rounds(self):
        if self._rounds is not None:
            return self._rounds
        return accounts_settings().password_hash_cost
