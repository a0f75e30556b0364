"""
Profile image storage and association service.

Files are saved through Django's default storage. The path kept on the
user is POSIX-style and relative to the public asset root, whatever
separator convention the storage backend produced.
"""

import logging
import posixpath
import uuid
from pathlib import PurePosixPath, PureWindowsPath

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.exceptions import SuspiciousFileOperation
from django.core.files.storage import default_storage
from django.db import transaction

from ..conf import accounts_settings
from .exceptions import (
    FileTooLargeError,
    ResourceNotFoundError,
    UploadError,
)
from .token_issuing import read_bearer_token, user_id_from_claims, verify_access_token

logger = logging.getLogger(__name__)

User = get_user_model()


def store_profile_image(image) -> str:
    """
    Save an uploaded image and return its stored filesystem path.

    Args:
        image: UploadedFile from ``request.FILES``

    Raises:
        FileTooLargeError: If the file exceeds PROFILE_IMAGE_MAX_SIZE
        UploadError: If the file is missing, has a disallowed extension,
            or cannot be stored
    """
    conf = accounts_settings()

    if image is None:
        raise UploadError("No image file was provided.")

    if image.size > conf.profile_image_max_size:
        raise FileTooLargeError()

    extension = PurePosixPath(image.name or '').suffix.lower().lstrip('.')
    if extension not in conf.profile_image_extensions:
        raise UploadError(
            f"Unsupported image type. Allowed: {', '.join(conf.profile_image_extensions)}"
        )

    name = posixpath.join(conf.profile_image_dir, f"{uuid.uuid4().hex}.{extension}")
    try:
        saved_name = default_storage.save(name, image)
        return default_storage.path(saved_name)
    except (OSError, NotImplementedError):
        logger.exception("Error storing profile image")
        raise UploadError()


def normalize_profile_image_path(stored_path, public_root) -> str:
    """
    Return ``stored_path`` as a POSIX path relative to ``public_root``.

    Backslashes and forward slashes are treated alike and ``.``/``..``
    segments are collapsed, so equivalent inputs give identical results.
    Paths outside the root are returned normalized but not relativised.
    """
    path = _as_posix(stored_path)
    root = _as_posix(public_root)

    try:
        relative = PurePosixPath(path).relative_to(root)
    except ValueError:
        return path

    return relative.as_posix()


def resolve_profile_image_url(profile_image):
    """Public URL for a stored profile image, or None if it no longer exists."""
    if not profile_image:
        return None

    name = _storage_name(profile_image)
    try:
        if not default_storage.exists(name):
            return None
    except SuspiciousFileOperation:
        logger.warning("Profile image %s is outside media storage", profile_image)
        return None
    return default_storage.url(name)


@transaction.atomic
def upload_profile_image(*, authorization, image) -> dict:
    """
    Store an uploaded image and attach it to the caller's profile.

    The caller is identified from the bearer token in ``authorization``,
    independently of any session.

    Returns:
        ``{"success": True, "image_url": <relative path>}``

    Raises:
        FileTooLargeError: If the file exceeds the size limit
        UploadError: If the file cannot be stored
        InvalidTokenError: If the bearer token is invalid
        ResourceNotFoundError: If the token's user does not exist
    """
    claims = verify_access_token(read_bearer_token(authorization))
    stored_path = store_profile_image(image)

    try:
        user = (
            User.objects
            .select_for_update()
            .get(id=user_id_from_claims(claims))
        )
    except User.DoesNotExist:
        default_storage.delete(stored_path)
        raise ResourceNotFoundError("No account matches this token.")

    previous = user.profile_image
    user.profile_image = normalize_profile_image_path(
        stored_path, accounts_settings().public_asset_root
    )
    user.save(update_fields=['profile_image', 'updated_at'])

    if previous and previous != user.profile_image:
        _discard(previous)

    return {'success': True, 'image_url': user.profile_image}


def _discard(profile_image):
    try:
        default_storage.delete(_storage_name(profile_image))
    except (OSError, SuspiciousFileOperation):
        logger.warning("Could not remove old profile image %s", profile_image)


def _storage_name(profile_image) -> str:
    """Map a path kept relative to the public asset root onto a storage name."""
    public_root = _as_posix(accounts_settings().public_asset_root)
    absolute = posixpath.join(public_root, _as_posix(profile_image))
    return normalize_profile_image_path(absolute, settings.MEDIA_ROOT)


def _as_posix(path) -> str:
    text = PureWindowsPath(str(path)).as_posix()
    normalized = posixpath.normpath(text)
    return '' if normalized == '.' else normalized
