from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    # Authentication
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),
    path('token/refresh/', views.refresh_token, name='token-refresh'),

    # User profile
    path('user/', views.get_current_user, name='current-user'),
    path('user/update/', views.update_current_user, name='update-profile'),
    path('user/delete/', views.delete_account, name='delete-account'),
    path('user/profile-image/', views.upload_profile_image_view, name='profile-image'),
    path('users/', views.list_users, name='user-list'),

    # Password
    path('password/change/', views.change_current_password, name='password-change'),

    # Email verification
    path('verify-email/send/', views.send_verification_email, name='verify-email-send'),
    path('verify-email/', views.confirm_verification_email, name='verify-email'),
]
