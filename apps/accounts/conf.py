"""
Settings for the accounts app.

Values are read once from ``settings.ACCOUNTS`` into an immutable
``AccountsSettings`` and cached. The cache is dropped when Django's
``setting_changed`` signal fires (``override_settings`` in tests).
"""

from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from pathlib import Path

from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver


DEFAULTS = {
    'PASSWORD_HASH_COST': 12,
    'VERIFICATION_CODE_TTL': timedelta(minutes=10),
    'VERIFICATION_EMAIL_SUBJECT': 'Storefront email verification code',
    'PROFILE_IMAGE_MAX_SIZE': 5 * 1024 * 1024,
    'PROFILE_IMAGE_DIR': 'images/profile',
    'PROFILE_IMAGE_EXTENSIONS': ('jpg', 'jpeg', 'png', 'gif', 'webp'),
    'PUBLIC_ASSET_ROOT': None,
}


@dataclass(frozen=True)
class AccountsSettings:
    password_hash_cost: int
    verification_code_ttl: timedelta
    verification_email_subject: str
    profile_image_max_size: int
    profile_image_dir: str
    profile_image_extensions: tuple
    public_asset_root: Path


@lru_cache(maxsize=None)
def accounts_settings() -> AccountsSettings:
    """Return the process-wide accounts configuration."""
    values = {**DEFAULTS, **getattr(settings, 'ACCOUNTS', {})}

    public_root = values['PUBLIC_ASSET_ROOT'] or settings.MEDIA_ROOT

    return AccountsSettings(
        password_hash_cost=int(values['PASSWORD_HASH_COST']),
        verification_code_ttl=values['VERIFICATION_CODE_TTL'],
        verification_email_subject=values['VERIFICATION_EMAIL_SUBJECT'],
        profile_image_max_size=int(values['PROFILE_IMAGE_MAX_SIZE']),
        profile_image_dir=values['PROFILE_IMAGE_DIR'],
        profile_image_extensions=tuple(values['PROFILE_IMAGE_EXTENSIONS']),
        public_asset_root=Path(public_root),
    )


@receiver(setting_changed)
def reload_accounts_settings(*args, setting=None, **kwargs):
    if setting in ('ACCOUNTS', 'MEDIA_ROOT'):
        accounts_settings.cache_clear()
