from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import models
import uuid


class UserRole(models.TextChoices):
    USER = 'user', 'User'
    ADMIN = 'admin', 'Admin'


class UserManager(BaseUserManager):
    """Custom user manager for email-based authentication."""

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('Email is required')

        # Role is never taken from callers of the regular path
        extra_fields['role'] = UserRole.USER
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        user = self.create_user(email, password, **extra_fields)
        user.role = UserRole.ADMIN
        user.save(using=self._db, update_fields=['role'])
        return user


class User(AbstractBaseUser):
    """Storefront customer identity, keyed by email."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True, max_length=255, db_index=True)
    name = models.CharField(max_length=50)
    phone_number = models.CharField(max_length=20, blank=True, null=True)

    # Shipping address
    address = models.CharField(max_length=255, blank=True, null=True)
    address_detail = models.CharField(max_length=255, blank=True, null=True)

    role = models.CharField(max_length=10, choices=UserRole.choices, default=UserRole.USER)

    # Path relative to the public asset root
    profile_image = models.CharField(max_length=500, blank=True, null=True)

    is_active = models.BooleanField(default=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    class Meta:
        db_table = 'users'
        indexes = [
            models.Index(fields=['created_at'], name='users_created_2b1f4e_idx'),
        ]

    def __str__(self):
        return self.email

    @property
    def is_admin(self):
        return self.role == UserRole.ADMIN

    # Django admin integration: the role flag is the only permission
    @property
    def is_staff(self):
        return self.is_admin

    @property
    def is_superuser(self):
        return self.is_admin

    def has_perm(self, perm, obj=None):
        return self.is_active and self.is_admin

    def has_perms(self, perm_list, obj=None):
        return all(self.has_perm(perm, obj) for perm in perm_list)

    def has_module_perms(self, app_label):
        return self.is_active and self.is_admin


class EmailVerification(models.Model):
    """Outstanding email-ownership code sent to an address."""

    email = models.EmailField(max_length=255, db_index=True)
    verification_code = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)
    consumed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'email_verifications'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['email', '-created_at'], name='email_verif_email_7c3a91_idx'),
        ]

    def __str__(self):
        return f"{self.email} ({self.created_at:%Y-%m-%d %H:%M})"

    @property
    def is_consumed(self):
        return self.consumed_at is not None
