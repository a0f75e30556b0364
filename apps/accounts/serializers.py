"""
Request serializers only check presence and types; format rules live in
the services so every caller gets the same field ordering and messages.
"""

from rest_framework import serializers


class SignUpSerializer(serializers.Serializer):
    """Serializer for user registration."""

    name = serializers.CharField(required=False, allow_blank=True, default='')
    phone_number = serializers.CharField(required=False, allow_blank=True, default='')
    email = serializers.CharField(required=False, allow_blank=True, default='')
    password = serializers.CharField(
        required=False,
        allow_blank=True,
        default='',
        write_only=True,
        trim_whitespace=False,
        style={'input_type': 'password'}
    )
    address = serializers.CharField(required=False, allow_blank=True, default='')
    address_detail = serializers.CharField(required=False, allow_blank=True, default='')


class SignInSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.CharField(required=False, allow_blank=True, default='')
    password = serializers.CharField(
        required=False,
        allow_blank=True,
        default='',
        write_only=True,
        trim_whitespace=False,
        style={'input_type': 'password'}
    )


class TokenRefreshRequestSerializer(serializers.Serializer):
    refresh = serializers.CharField(required=True, help_text="Refresh token issued at sign-in")


class UpdateProfileSerializer(serializers.Serializer):
    """Fields a user may change on their own profile."""

    email = serializers.CharField(required=True)
    address = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    address_detail = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    password = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default=None,
        write_only=True,
        trim_whitespace=False,
        style={'input_type': 'password'}
    )


class ChangePasswordSerializer(serializers.Serializer):
    new_password = serializers.CharField(
        required=True,
        trim_whitespace=False,
        style={'input_type': 'password'}
    )
    new_password_confirm = serializers.CharField(
        required=True,
        trim_whitespace=False,
        style={'input_type': 'password'}
    )


class SendVerificationCodeSerializer(serializers.Serializer):
    email = serializers.EmailField(required=True)


class VerifyEmailSerializer(serializers.Serializer):
    email = serializers.EmailField(required=True)
    code = serializers.CharField(required=True, help_text="6-digit code from the email")


class ProfileImageSerializer(serializers.Serializer):
    image = serializers.FileField(required=False, allow_empty_file=True)


class ProfileSerializer(serializers.Serializer):
    """Profile projection returned by the services."""

    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    phone_number = serializers.CharField(read_only=True, allow_null=True)
    email = serializers.EmailField(read_only=True)
    address = serializers.CharField(read_only=True, allow_null=True)
    address_detail = serializers.CharField(read_only=True, allow_null=True)
    role = serializers.CharField(read_only=True)
    profile_image = serializers.CharField(read_only=True, allow_null=True)
