from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdminRole
from apps.core.responses import success_response
from .serializers import SystemSettingsSerializer, UpdateSettingsSerializer
from .services import get_settings, update_settings


@extend_schema(
    methods=['GET'],
    responses={200: SystemSettingsSerializer},
    description="Get system settings (created with defaults on first access).",
    tags=['settings'],
)
@extend_schema(
    methods=['PUT'],
    request=UpdateSettingsSerializer,
    responses={200: SystemSettingsSerializer},
    description="Update the default milk rate used for new consumers.",
    tags=['settings'],
)
@api_view(['GET', 'PUT'])
@permission_classes([IsAuthenticated, IsAdminRole])
def system_settings(request):
    """Read or update the settings singleton."""
    if request.method == 'GET':
        return success_response(SystemSettingsSerializer(get_settings()).data)

    serializer = UpdateSettingsSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    instance = update_settings(
        default_milk_rate=serializer.validated_data['default_milk_rate']
    )
    return success_response(SystemSettingsSerializer(instance).data)
