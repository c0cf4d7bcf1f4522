from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdminRole
from apps.core.pagination import EnvelopePagination
from apps.core.responses import success_response, paginate
from .serializers import (
    EmployeeSerializer,
    EmployeeCreateSerializer,
    EmployeeUpdateSerializer,
    EmployeeFilterSerializer,
    ResetPasswordSerializer,
)
from .services import (
    get_employee,
    list_employees,
    create_employee,
    update_employee,
    delete_employee,
    reset_employee_password,
)


class EmployeeViewSet(viewsets.GenericViewSet):
    """
    ViewSet for employee management (admin only).

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Get employees (search, is_active filters)
    create: Create an employee and its login account
    retrieve: Get a specific employee
    update: Update an employee
    partial_update: Partially update an employee
    destroy: Delete an employee without delivery history
    reset_password: Set a new login password
    """

    serializer_class = EmployeeSerializer
    permission_classes = [IsAuthenticated, IsAdminRole]
    pagination_class = EnvelopePagination

    def get_queryset(self):
        filter_serializer = EmployeeFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        return list_employees(
            search=params.get('search'),
            is_active=params.get('is_active'),
        )

    def list(self, request):
        return paginate(self, self.get_queryset(), EmployeeSerializer)

    @extend_schema(request=EmployeeCreateSerializer, responses={201: EmployeeSerializer})
    def create(self, request):
        serializer = EmployeeCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        employee = create_employee(**serializer.validated_data)
        return success_response(EmployeeSerializer(employee).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        return success_response(EmployeeSerializer(get_employee(employee_id=pk)).data)

    @extend_schema(request=EmployeeUpdateSerializer, responses={200: EmployeeSerializer})
    def update(self, request, pk=None, partial=False):
        serializer = EmployeeUpdateSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        employee = update_employee(employee_id=pk, **serializer.validated_data)
        return success_response(EmployeeSerializer(employee).data)

    @extend_schema(request=EmployeeUpdateSerializer, responses={200: EmployeeSerializer})
    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk, partial=True)

    def destroy(self, request, pk=None):
        delete_employee(employee_id=pk)
        return success_response(message='Employee deleted successfully')

    @extend_schema(request=ResetPasswordSerializer, responses={200: None})
    @action(detail=True, methods=['put'], url_path='reset-password')
    def reset_password(self, request, pk=None):
        """Reset an employee's login password."""
        serializer = ResetPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        reset_employee_password(
            employee_id=pk,
            new_password=serializer.validated_data['new_password']
        )
        return success_response(message='Password reset successfully')
