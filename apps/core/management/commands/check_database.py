"""
Management command used as a startup probe for the database connection.

Usage:
    python manage.py check_database
    python manage.py check_database --database replica

Exits with status 1 when the database cannot be reached, so a process
supervisor can refuse to start the web server.
"""

import logging

from django.core.management.base import BaseCommand, CommandError

from apps.core.checks import probe_database

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Verify that the configured database is reachable'

    def add_arguments(self, parser):
        parser.add_argument(
            '--database',
            default='default',
            help='Database alias to probe (default: "default")',
        )

    def handle(self, *args, **options):
        alias = options['database']
        problem = probe_database(alias)

        if problem:
            logger.error("Database '%s' unreachable: %s", alias, problem)
            raise CommandError(f"Database '{alias}' is unreachable: {problem}")

        self.stdout.write(self.style.SUCCESS(f"Database '{alias}' is reachable."))
