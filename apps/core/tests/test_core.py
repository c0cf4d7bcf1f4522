import pytest
from unittest.mock import patch

from django.core.management import call_command
from django.core.management.base import CommandError
from django.urls import reverse
from rest_framework import status

from apps.core.checks import probe_database, database_reachable_check
from apps.core.exceptions import ServiceError, NotFoundError
from apps.core.handlers import service_exception_handler


class TestServiceErrors:

    def test_default_messages_and_status(self):
        assert ServiceError().status_code == 400
        assert NotFoundError().status_code == 404
        assert NotFoundError('Gone').message == 'Gone'

    def test_handler_wraps_service_error(self):
        response = service_exception_handler(NotFoundError('Consumer not found'), {})

        assert response.status_code == 404
        assert response.data == {'success': False, 'message': 'Consumer not found'}

    def test_handler_maps_django_validation_error(self):
        from django.core.exceptions import ValidationError

        response = service_exception_handler(
            ValidationError({'mobile_number': ['Please provide a valid 10-digit Indian mobile number']}),
            {},
        )

        assert response.status_code == 400
        assert response.data['success'] is False
        assert 'mobile_number' in response.data['errors']

    def test_handler_ignores_unknown_exceptions(self):
        assert service_exception_handler(RuntimeError('boom'), {}) is None


@pytest.mark.django_db
class TestDatabaseChecks:

    def test_probe_database_ok(self):
        assert probe_database('default') is None

    def test_check_reports_unreachable_database(self):
        with patch('apps.core.checks.probe_database', return_value='connection refused'):
            errors = database_reachable_check(None, databases=['default'])

        assert len(errors) == 1
        assert errors[0].id == 'core.E001'

    def test_check_database_command(self):
        call_command('check_database')

    def test_check_database_command_fails(self):
        with patch(
            'apps.core.management.commands.check_database.probe_database',
            return_value='connection refused',
        ):
            with pytest.raises(CommandError):
                call_command('check_database')


@pytest.mark.django_db
class TestHealthAndEnvelope:

    def test_health_check(self, api_client):
        response = api_client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['database'] == 'ok'

    def test_pagination_envelope(self, admin_client, consumer, other_consumer):
        response = admin_client.get(reverse('consumers:consumer-list'), {'limit': 1, 'page': 2})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert len(response.data['data']) == 1
        assert response.data['total'] == 2
        assert response.data['totalPages'] == 2
        assert response.data['currentPage'] == 2
