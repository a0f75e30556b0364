import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken, RefreshToken
from apps.accounts.models import User, UserRole
from apps.accounts.services import hash_password


def make_user(**overrides):
    """Create a user directly in the store, bypassing sign-up validation."""
    fields = {
        'name': 'Test User',
        'phone_number': '010-1234-5678',
        'email': 'testuser@example.com',
        'address': '1 Test Street',
        'address_detail': 'Apt 1',
        'role': UserRole.USER,
    }
    password = overrides.pop('password', 'TestPass123!')
    fields.update(overrides)
    return User.objects.create(password=hash_password(password), **fields)


def bearer(user):
    """Authorization header value for a user."""
    return f'Bearer {AccessToken.for_user(user)}'


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return make_user()


@pytest.fixture
def other_user(db):
    """Create and return another test user."""
    return make_user(
        name='Other User',
        email='otheruser@example.com',
        phone_number='010-9876-5432',
        password='OtherPass123!',
    )


@pytest.fixture
def admin_user(db):
    """Create and return an admin user."""
    return make_user(
        name='Admin User',
        email='admin@example.com',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return make_user(
        name='Inactive User',
        email='inactive@example.com',
        is_active=False,
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def admin_client(api_client, admin_user):
    """Return API client authenticated as admin."""
    api_client.credentials(HTTP_AUTHORIZATION=bearer(admin_user))
    return api_client


@pytest.fixture
def sign_up_data():
    """Valid sign-up payload."""
    return {
        'name': 'Kim Min',
        'phone_number': '010-1234-5678',
        'email': 'a@b.com',
        'password': 'Abcd1234!',
        'address': '12 Teheran-ro, Seoul',
        'address_detail': 'Apt 301',
    }


@pytest.fixture
def media_root(settings, tmp_path):
    """Point MEDIA_ROOT (and the public asset root) at a temp directory."""
    settings.MEDIA_ROOT = tmp_path
    return tmp_path
