from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdminRole, IsEmployeeRole
from apps.core.pagination import EnvelopePagination
from apps.core.responses import success_response, paginate
from .serializers import (
    AssignmentSerializer,
    AssignmentCreateSerializer,
    AssignmentUpdateSerializer,
    AssignmentFilterSerializer,
    MyAssignmentSerializer,
)
from .services import (
    list_assignments,
    list_employee_assignments,
    create_assignment,
    update_assignment,
    delete_assignment,
)


class AssignmentViewSet(viewsets.GenericViewSet):
    """
    ViewSet for consumer-to-employee assignments.

    list: Get assignments (admin)
    create: Assign a consumer to an employee (admin)
    update: Change quota or active flag (admin)
    partial_update: Same as update (admin)
    destroy: Remove an assignment (admin)
    my_assignments: Active assignments of the calling employee
    """

    serializer_class = AssignmentSerializer
    pagination_class = EnvelopePagination

    def get_permissions(self):
        if self.action == 'my_assignments':
            return [IsAuthenticated(), IsEmployeeRole()]
        return [IsAuthenticated(), IsAdminRole()]

    def get_queryset(self):
        filter_serializer = AssignmentFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        return list_assignments(
            employee_id=params.get('employee_id'),
            consumer_id=params.get('consumer_id'),
            is_active=params.get('is_active'),
        )

    def list(self, request):
        return paginate(self, self.get_queryset(), AssignmentSerializer)

    @extend_schema(request=AssignmentCreateSerializer, responses={201: AssignmentSerializer})
    def create(self, request):
        serializer = AssignmentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        assignment = create_assignment(**serializer.validated_data)
        return success_response(AssignmentSerializer(assignment).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=AssignmentUpdateSerializer, responses={200: AssignmentSerializer})
    def update(self, request, pk=None, partial=False):
        serializer = AssignmentUpdateSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        assignment = update_assignment(assignment_id=pk, **serializer.validated_data)
        return success_response(AssignmentSerializer(assignment).data)

    @extend_schema(request=AssignmentUpdateSerializer, responses={200: AssignmentSerializer})
    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk, partial=True)

    def destroy(self, request, pk=None):
        delete_assignment(assignment_id=pk)
        return success_response(message='Assignment deleted successfully')

    @extend_schema(responses={200: MyAssignmentSerializer(many=True)})
    @action(detail=False, methods=['get'], url_path='my-assignments')
    def my_assignments(self, request):
        """Get the calling employee's active assignments."""
        assignments = list_employee_assignments(employee=request.user.employee_profile)
        return success_response(MyAssignmentSerializer(assignments, many=True).data)
