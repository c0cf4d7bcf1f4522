from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework_simplejwt.views import TokenObtainPairView
from drf_spectacular.utils import extend_schema

from apps.core.responses import success_response
from .serializers import UserSerializer, RoleTokenObtainPairSerializer


class LoginView(TokenObtainPairView):
    """Obtain a JWT pair for an admin or employee (username = mobile number for employees)."""

    serializer_class = RoleTokenObtainPairSerializer


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated principal.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user profile."""
    return success_response(UserSerializer(request.user).data)
