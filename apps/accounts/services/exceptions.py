"""
Domain exceptions for accounts services.

Every error carries a kind, a message and an HTTP status so views can
render them uniformly as ``{"kind", "message", "status"}``.

Exception Hierarchy:
    AccountsServiceError (base, 500)
    ├── InputError (400)
    ├── ConflictError (409)
    ├── ResourceNotFoundError (404)
    ├── BusinessRuleError (400)
    ├── InvalidCredentialsError (401)
    ├── InactiveAccountError (403)
    ├── AuthenticationError (401)
    ├── InvalidTokenError (401)
    ├── VerificationError (400)
    ├── FileTooLargeError (413)
    ├── UploadError (400)
    └── ServerError (500)
"""
from rest_framework.exceptions import APIException


class AccountsServiceError(APIException):
    """Base exception for accounts services."""
    status_code = 500
    default_detail = 'An unexpected error occurred.'
    default_code = 'server_error'

    def __init__(self, detail=None):
        super().__init__(detail=detail, code=self.default_code)

    @property
    def kind(self):
        return self.default_code

    @property
    def message(self):
        return str(self.detail)

    def as_dict(self):
        return {
            'kind': self.kind,
            'message': self.message,
            'status': self.status_code,
        }


class InputError(AccountsServiceError):
    """Raised when a field fails its format rule."""
    status_code = 400
    default_detail = 'Invalid input.'
    default_code = 'input_error'


class ConflictError(AccountsServiceError):
    """Raised when an email is already registered."""
    status_code = 409
    default_detail = 'This email is already registered.'
    default_code = 'conflict_error'


class ResourceNotFoundError(AccountsServiceError):
    """Raised when a user or record does not exist."""
    status_code = 404
    default_detail = 'Resource not found.'
    default_code = 'resource_not_found_error'


class BusinessRuleError(AccountsServiceError):
    """Raised when an operation violates an identity rule."""
    status_code = 400
    default_detail = 'Operation not allowed.'
    default_code = 'business_error'


class InvalidCredentialsError(AccountsServiceError):
    """Raised when a password does not match."""
    status_code = 401
    default_detail = 'Invalid email or password.'
    default_code = 'invalid_credentials'


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    status_code = 403
    default_detail = 'Account is deactivated.'
    default_code = 'inactive_account'


class AuthenticationError(AccountsServiceError):
    """Generic authentication failure returned to clients."""
    status_code = 401
    default_detail = 'Authentication failed or token could not be issued.'
    default_code = 'authentication_error'


class InvalidTokenError(AccountsServiceError):
    """Raised when a JWT is missing, malformed, expired or of the wrong type."""
    status_code = 401
    default_detail = 'Invalid or expired token.'
    default_code = 'invalid_token'


class VerificationError(AccountsServiceError):
    """Raised when an email verification code does not match."""
    status_code = 400
    default_detail = 'An error occurred during email verification.'
    default_code = 'verification_error'


class FileTooLargeError(AccountsServiceError):
    """Raised when an uploaded file exceeds the size limit."""
    status_code = 413
    default_detail = 'File size limit exceeded.'
    default_code = 'file_too_large'


class UploadError(AccountsServiceError):
    """Raised when an upload cannot be parsed or stored."""
    status_code = 400
    default_detail = 'Failed to upload profile image.'
    default_code = 'upload_error'


class ServerError(AccountsServiceError):
    """Internal failure; the cause is logged, not returned."""
    pass
