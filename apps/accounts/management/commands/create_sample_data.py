"""
Management command to create sample accounts for trying the API.

Usage:
    python manage.py create_sample_data

This creates:
- 1 admin (admin@example.com)
- 3 customers (alice, bob, charlie)
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User, UserRole, EmailVerification
from apps.accounts.services import sign_up, ConflictError


SAMPLE_CUSTOMERS = [
    {
        'name': 'Alice Kim',
        'phone_number': '010-1111-2222',
        'email': 'alice@example.com',
        'address': '12 Teheran-ro, Gangnam-gu, Seoul',
        'address_detail': 'Apt 301',
    },
    {
        'name': 'Bob Lee',
        'phone_number': '010-3333-4444',
        'email': 'bob@example.com',
        'address': '45 Sejong-daero, Jung-gu, Seoul',
        'address_detail': '',
    },
    {
        'name': 'Charlie Park',
        'phone_number': '011-555-6666',
        'email': 'charlie@example.com',
        'address': '7 Haeundae-ro, Busan',
        'address_detail': '2F',
    },
]

SAMPLE_PASSWORD = 'Password123!'
ADMIN_PASSWORD = 'Admin1234!'


class Command(BaseCommand):
    help = 'Create sample accounts for testing the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete sample accounts before creating them again',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing sample accounts...')
            self.clear_data()

        self.stdout.write('Creating sample accounts...')
        self.create_admin()
        self.create_customers()

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write(f'  admin@example.com / {ADMIN_PASSWORD} (admin)')
        for customer in SAMPLE_CUSTOMERS:
            self.stdout.write(f"  {customer['email']} / {SAMPLE_PASSWORD}")

    def clear_data(self):
        """Remove sample accounts and their verification codes."""
        emails = ['admin@example.com'] + [c['email'] for c in SAMPLE_CUSTOMERS]
        EmailVerification.objects.filter(email__in=emails).delete()
        User.objects.filter(email__in=emails).delete()

    def create_admin(self):
        if User.objects.filter(email='admin@example.com').exists():
            self.stdout.write('  Admin already exists, skipping')
            return
        User.objects.create_superuser(
            email='admin@example.com',
            password=ADMIN_PASSWORD,
            name='Admin',
        )
        self.stdout.write(f'  Created admin ({UserRole.ADMIN})')

    def create_customers(self):
        """Register customers through the normal sign-up path."""
        for customer in SAMPLE_CUSTOMERS:
            try:
                sign_up(password=SAMPLE_PASSWORD, **customer)
                self.stdout.write(f"  Created {customer['email']}")
            except ConflictError:
                self.stdout.write(f"  {customer['email']} already exists, skipping")
