"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    InputError,
    ConflictError,
    ResourceNotFoundError,
    BusinessRuleError,
    InvalidCredentialsError,
    InactiveAccountError,
    AuthenticationError,
    InvalidTokenError,
    VerificationError,
    FileTooLargeError,
    UploadError,
    ServerError,
)
from .password_hashing import hash_password, verify_password
from .token_issuing import (
    TokenPair,
    issue_access_token,
    issue_refresh_token,
    issue_token_pair,
    verify_access_token,
    verify_refresh_token,
    read_bearer_token,
)
from .user_registration import sign_up
from .user_authentication import sign_in, refresh_access_token
from .account_management import (
    get_profile,
    update_profile,
    get_all_profiles,
    delete_profile,
)
from .password_change import change_password
from .email_verification import send_verification_code, verify_email
from .profile_images import (
    upload_profile_image,
    normalize_profile_image_path,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'InputError',
    'ConflictError',
    'ResourceNotFoundError',
    'BusinessRuleError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'AuthenticationError',
    'InvalidTokenError',
    'VerificationError',
    'FileTooLargeError',
    'UploadError',
    'ServerError',
    # Passwords & tokens
    'hash_password',
    'verify_password',
    'TokenPair',
    'issue_access_token',
    'issue_refresh_token',
    'issue_token_pair',
    'verify_access_token',
    'verify_refresh_token',
    'read_bearer_token',
    # Services
    'sign_up',
    'sign_in',
    'refresh_access_token',
    'get_profile',
    'update_profile',
    'get_all_profiles',
    'delete_profile',
    'change_password',
    'send_verification_code',
    'verify_email',
    'upload_profile_image',
    'normalize_profile_image_path',
]
