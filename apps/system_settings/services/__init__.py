"""Services for system settings."""

from .exceptions import SettingsServiceError, InvalidRateError
from .settings_management import get_settings, get_default_milk_rate, update_settings

__all__ = [
    # Exceptions
    'SettingsServiceError',
    'InvalidRateError',
    # Services
    'get_settings',
    'get_default_milk_rate',
    'update_settings',
]
