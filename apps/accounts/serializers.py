from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Principal info returned by /api/auth/me/ and after login."""

    employee_id = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'name',
            'email',
            'role',
            'employee_id',
            'created_at',
            'last_login',
        ]
        read_only_fields = fields

    def get_employee_id(self, obj):
        profile = getattr(obj, 'employee_profile', None)
        return str(profile.id) if profile else None


class RoleTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    Token pair serializer that embeds the caller role.

    The role claim lets the web client pick the admin or employee layout
    without an extra round-trip.
    """

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token['role'] = user.role
        return token

    def validate(self, attrs):
        data = super().validate(attrs)
        data['user'] = UserSerializer(self.user).data
        return data
