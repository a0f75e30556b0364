# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import User, UserRole, EmailVerification


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """
    Admin interface for storefront users.

    Passwords are never editable here; they are set through the
    password change flow so the configured hasher is always used.
    """

    list_display = [
        'email',
        'name',
        'phone_number',
        'role_badge',
        'is_active',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'role',
        'is_active',
        'created_at',
    ]

    search_fields = [
        'email',
        'name',
        'phone_number',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'name', 'phone_number')
        }),
        ('Address', {
            'fields': ('address', 'address_detail'),
        }),
        ('Permissions', {
            'fields': ('role', 'is_active'),
        }),
        ('Profile Image', {
            'fields': ('profile_image',),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    readonly_fields = [
        'email',
        'created_at',
        'updated_at',
        'last_login',
    ]

    def role_badge(self, obj):
        """Display role as colored badge."""
        if obj.role == UserRole.ADMIN:
            return format_html(
                '<span style="background: #A47449; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">Admin</span>'
            )
        return format_html(
            '<span style="background: #ccc; color: #666; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">User</span>'
        )
    role_badge.short_description = 'Role'
    role_badge.admin_order_field = 'role'

    actions = ['activate_users', 'deactivate_users']

    @admin.action(description='Activate selected users')
    def activate_users(self, request, queryset):
        count = queryset.update(is_active=True)
        self.message_user(request, f'Activated {count} user(s).')

    @admin.action(description='Deactivate selected users')
    def deactivate_users(self, request, queryset):
        """Deactivate selected users (excludes admins for safety)."""
        safe_queryset = queryset.exclude(role=UserRole.ADMIN)
        count = safe_queryset.update(is_active=False)
        skipped = queryset.count() - count
        msg = f'Deactivated {count} user(s).'
        if skipped:
            msg += f' Skipped {skipped} admin(s) for safety.'
        self.message_user(request, msg)


@admin.register(EmailVerification)
class EmailVerificationAdmin(admin.ModelAdmin):
    list_display = ['email', 'created_at', 'consumed_at']
    list_filter = ['created_at']
    search_fields = ['email']
    ordering = ['-created_at']
    readonly_fields = ['email', 'verification_code', 'created_at', 'consumed_at']
