"""
Management command to create the initial administrator account.

Usage:
    python manage.py create_admin
    python manage.py create_admin --username owner --password s3cret --email owner@example.com

Running it twice is harmless: an existing account is left untouched.
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User


class Command(BaseCommand):
    help = 'Create the initial admin account (idempotent)'

    def add_arguments(self, parser):
        parser.add_argument('--username', default='admin', help='Admin username (default: admin)')
        parser.add_argument('--password', default='admin123', help='Admin password (default: admin123)')
        parser.add_argument('--email', default='admin@milksystem.com', help='Admin email')
        parser.add_argument('--name', default='Administrator', help='Display name')

    @transaction.atomic
    def handle(self, *args, **options):
        username = options['username']

        if User.objects.filter(username=username).exists():
            self.stdout.write(
                self.style.WARNING(f'Admin account "{username}" already exists.')
            )
            return

        User.objects.create_admin(
            username=username,
            password=options['password'],
            email=options['email'],
            name=options['name'],
        )

        self.stdout.write(self.style.SUCCESS(f'Admin account "{username}" created.'))
