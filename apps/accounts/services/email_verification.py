"""Email verification service."""

import logging
import secrets

from django.core.mail import send_mail
from django.conf import settings
from django.db import DatabaseError, transaction
from django.utils import timezone

from ..conf import accounts_settings
from ..models import EmailVerification
from .exceptions import ServerError, VerificationError

logger = logging.getLogger(__name__)

CODE_MIN = 100000
CODE_MAX = 999999

VERIFIED_MESSAGE = "Email has been verified."


def generate_verification_code() -> int:
    """Uniformly random 6-digit code in [100000, 999999]."""
    return CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN + 1)


def send_verification_code(*, email: str) -> int:
    """
    Mail a new verification code to ``email`` and record it.

    Returns:
        The code, for logging and tests; never echo it to the client.

    Raises:
        ServerError: If the mail cannot be sent
    """
    code = generate_verification_code()

    try:
        send_mail(
            subject=accounts_settings().verification_email_subject,
            message=f"Verification code: {code}",
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[email],
        )
    except Exception:
        logger.exception("Error sending verification email to %s", email)
        raise ServerError("Verification email could not be sent.")

    EmailVerification.objects.create(email=email, verification_code=code)
    logger.info("Verification code sent to %s", email)

    return code


@transaction.atomic
def verify_email(*, code, email: str) -> str:
    """
    Check ``code`` against the latest outstanding code for ``email``.

    Only the most recent unconsumed, unexpired code counts; it is consumed
    on success.

    Returns:
        Success message

    Raises:
        VerificationError: If there is no usable code or it does not match
    """
    submitted = _parse_code(code)

    cutoff = timezone.now() - accounts_settings().verification_code_ttl

    try:
        record = (
            EmailVerification.objects
            .select_for_update()
            .filter(email=email, consumed_at__isnull=True, created_at__gte=cutoff)
            .order_by('-created_at', '-id')
            .first()
        )
    except DatabaseError:
        logger.exception("Error loading verification code for %s", email)
        raise VerificationError()

    if record is None:
        logger.warning("No outstanding verification code for %s", email)
        raise VerificationError("No valid verification code. Request a new one.")

    if submitted != record.verification_code:
        logger.warning("Verification code mismatch for %s", email)
        raise VerificationError("Verification code does not match.")

    # Consume this code and any older ones still outstanding
    EmailVerification.objects.filter(
        email=email, consumed_at__isnull=True
    ).update(consumed_at=timezone.now())

    return VERIFIED_MESSAGE


def _parse_code(code) -> int:
    """Accept an int or a string of digits; bools and floats never match."""
    if isinstance(code, int) and not isinstance(code, bool):
        return code
    if isinstance(code, str):
        digits = code.strip()
        if digits.isascii() and digits.isdigit():
            return int(digits)
    raise VerificationError("Verification code must be a number.")
