from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework import status

from apps.system_settings.models import SystemSettings
from apps.system_settings.services import get_settings, get_default_milk_rate, update_settings
from apps.system_settings.services.exceptions import InvalidRateError


@pytest.mark.django_db
class TestSettingsService:

    def test_lazily_created_with_fallback_rate(self, settings):
        settings.DEFAULT_MILK_RATE = Decimal('58')

        assert not SystemSettings.objects.exists()
        assert get_default_milk_rate() == Decimal('58')
        assert SystemSettings.objects.count() == 1

    def test_singleton(self):
        assert get_settings().pk == get_settings().pk
        assert SystemSettings.objects.count() == 1

    def test_update(self):
        update_settings(default_milk_rate=Decimal('64.00'))

        assert get_default_milk_rate() == Decimal('64.00')

    def test_negative_rate_rejected(self):
        with pytest.raises(InvalidRateError):
            update_settings(default_milk_rate=Decimal('-1'))


@pytest.mark.django_db
class TestSettingsAPI:
    """Tests for GET/PUT /api/settings/"""

    def test_get(self, admin_client):
        response = admin_client.get(reverse('system_settings:settings'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['default_milk_rate'] == '60.00'

    def test_put(self, admin_client):
        response = admin_client.put(
            reverse('system_settings:settings'), {'default_milk_rate': '70.00'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['default_milk_rate'] == '70.00'

    def test_put_negative(self, admin_client):
        response = admin_client.put(
            reverse('system_settings:settings'), {'default_milk_rate': '-5'}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_employee_forbidden(self, employee_client):
        response = employee_client.get(reverse('system_settings:settings'))

        assert response.status_code == status.HTTP_403_FORBIDDEN
