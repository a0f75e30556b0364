from rest_framework import status, serializers
from rest_framework.decorators import (
    api_view,
    authentication_classes,
    parser_classes,
    permission_classes,
)
from rest_framework.exceptions import ParseError, UnsupportedMediaType
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .permissions import IsAdminRole
from .serializers import (
    SignUpSerializer,
    SignInSerializer,
    TokenRefreshRequestSerializer,
    UpdateProfileSerializer,
    ChangePasswordSerializer,
    SendVerificationCodeSerializer,
    VerifyEmailSerializer,
    ProfileImageSerializer,
    ProfileSerializer,
)
from .services import (
    AccountsServiceError,
    InputError,
    UploadError,
    sign_up,
    sign_in,
    refresh_access_token,
    get_profile,
    update_profile,
    get_all_profiles,
    delete_profile,
    change_password,
    send_verification_code,
    verify_email,
    upload_profile_image,
)
from .services.account_management import profile_projection


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class SignInResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    tokens = TokensResponseSerializer()


class SignUpResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = ProfileSerializer()


class AccessTokenResponseSerializer(serializers.Serializer):
    access = serializers.CharField()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    kind = serializers.CharField()
    message = serializers.CharField()
    status = serializers.IntegerField()


class ProfileImageResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    image_url = serializers.CharField(required=False)
    message = serializers.CharField(required=False)


class DeleteAccountRequestSerializer(serializers.Serializer):
    confirm = serializers.BooleanField(help_text="Must be true to confirm deletion")


def error_response(error: AccountsServiceError) -> Response:
    """Render a service error as {kind, message, status}."""
    return Response(error.as_dict(), status=error.status_code)


def validated_data(serializer_class, data) -> dict:
    """Run a request serializer, raising InputError with the first message."""
    serializer = serializer_class(data=data)
    if not serializer.is_valid():
        field, messages = next(iter(serializer.errors.items()))
        raise InputError(f"{field}: {messages[0]}")
    return serializer.validated_data


@extend_schema(
    request=SignUpSerializer,
    responses={
        201: SignUpResponseSerializer,
        400: ErrorResponseSerializer,
        409: ErrorResponseSerializer,
    },
    description="Register a new customer account.",
    tags=['auth'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def register(request):
    """Register a new user account."""
    try:
        user = sign_up(**validated_data(SignUpSerializer, request.data))
    except AccountsServiceError as e:
        return error_response(e)

    return Response({
        'message': 'Registration successful.',
        'user': profile_projection(user),
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=SignInSerializer,
    responses={
        200: SignInResponseSerializer,
        401: ErrorResponseSerializer,
    },
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = SignInSerializer(data=request.data)
    serializer.is_valid()

    try:
        tokens = sign_in(
            email=serializer.validated_data.get('email', ''),
            password=serializer.validated_data.get('password', ''),
        )
    except AccountsServiceError as e:
        return error_response(e)

    return Response({
        'message': 'Login successful',
        'tokens': {
            'refresh': tokens.refresh,
            'access': tokens.access,
        }
    })


@extend_schema(
    request=TokenRefreshRequestSerializer,
    responses={
        200: AccessTokenResponseSerializer,
        401: ErrorResponseSerializer,
    },
    description="Exchange a refresh token for a new access token.",
    tags=['auth'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def refresh_token(request):
    """Issue a new access token."""
    try:
        access = refresh_access_token(
            refresh_token=request.data.get('refresh', '')
        )
    except AccountsServiceError as e:
        return error_response(e)

    return Response({'access': access})


@extend_schema(
    responses={
        200: ProfileSerializer,
        404: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description="Get the current authenticated user's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user profile."""
    try:
        return Response(get_profile(user_id=request.user.id))
    except AccountsServiceError as e:
        return error_response(e)


@extend_schema(
    request=UpdateProfileSerializer,
    responses={
        200: ProfileSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Update the current user's address and optionally password.",
    tags=['auth'],
)
@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def update_current_user(request):
    """Update user profile."""
    try:
        data = validated_data(UpdateProfileSerializer, request.data)
        profile = update_profile(current_email=request.user.email, **data)
    except AccountsServiceError as e:
        return error_response(e)

    return Response(profile)


@extend_schema(
    request=DeleteAccountRequestSerializer,
    responses={
        200: SignUpResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Delete the current user's account.",
    tags=['auth'],
)
@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def delete_account(request):
    """Delete the authenticated user's account."""
    if request.data.get('confirm') is not True:
        return error_response(InputError("Confirmation required"))

    try:
        profile = delete_profile(user_id=request.user.id)
    except AccountsServiceError as e:
        return error_response(e)

    return Response({
        'message': 'Account deleted successfully',
        'user': profile,
    })


@extend_schema(
    responses={
        200: ProfileSerializer(many=True),
        404: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description="List every user profile (admin only).",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def list_users(request):
    """List all user profiles."""
    try:
        return Response(get_all_profiles())
    except AccountsServiceError as e:
        return error_response(e)


@extend_schema(
    request=ChangePasswordSerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Change the current user's password.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def change_current_password(request):
    """Change password of the authenticated user."""
    try:
        data = validated_data(ChangePasswordSerializer, request.data)
        message = change_password(email=request.user.email, **data)
    except AccountsServiceError as e:
        return error_response(e)

    return Response({'message': message})


@extend_schema(
    request=SendVerificationCodeSerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description="Email a 6-digit verification code to the given address.",
    tags=['auth'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def send_verification_email(request):
    """Send email verification code."""
    try:
        data = validated_data(SendVerificationCodeSerializer, request.data)
        send_verification_code(email=data['email'])
    except AccountsServiceError as e:
        return error_response(e)

    # The code itself is never returned to the client
    return Response({'message': 'Verification code sent.'})


@extend_schema(
    request=VerifyEmailSerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Confirm ownership of an email address with the mailed code.",
    tags=['auth'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def confirm_verification_email(request):
    """Verify email with code."""
    try:
        data = validated_data(VerifyEmailSerializer, request.data)
        message = verify_email(code=data['code'], email=data['email'])
    except AccountsServiceError as e:
        return error_response(e)

    return Response({'message': message})


@extend_schema(
    request={'multipart/form-data': ProfileImageSerializer},
    responses={
        200: ProfileImageResponseSerializer,
        400: ProfileImageResponseSerializer,
        401: ProfileImageResponseSerializer,
        413: ProfileImageResponseSerializer,
    },
    description="Upload a profile image for the user named by the bearer token.",
    tags=['auth'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
@parser_classes([MultiPartParser, FormParser])
def upload_profile_image_view(request):
    """Upload profile image; the service verifies the bearer token itself."""
    try:
        try:
            image = request.FILES.get('image')
        except (ParseError, UnsupportedMediaType):
            raise UploadError()

        result = upload_profile_image(
            authorization=request.headers.get('Authorization'),
            image=image,
        )
    except AccountsServiceError as e:
        return Response({'success': False, **e.as_dict()}, status=e.status_code)

    return Response(result)
