"""
Role-based permission classes.

Every core operation receives the caller principal as ``request.user``;
these classes gate endpoints on its ``role``.

Usage:
    class ConsumerViewSet(viewsets.ModelViewSet):
        permission_classes = [IsAuthenticated, IsAdminRole]
"""
from rest_framework.permissions import BasePermission


class IsAdminRole(BasePermission):
    """Allow access only to admin principals."""

    message = 'Only administrators can perform this action.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_admin)


class IsEmployeeRole(BasePermission):
    """
    Allow access only to employee principals with a delivery profile.

    The profile check keeps employee-only views from failing on a login
    account whose Employee record was never created.
    """

    message = 'Only employees can perform this action.'

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated and user.is_employee):
            return False
        return hasattr(user, 'employee_profile')
