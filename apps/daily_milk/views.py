from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import IsAdminRole, IsEmployeeRole
from apps.core.pagination import EnvelopePagination
from apps.core.responses import success_response
from .serializers import (
    DateRangeFilterSerializer,
    DeliveryFilterSerializer,
    DateParamSerializer,
    DailyEntryCreateSerializer,
    DeliveryCreateSerializer,
    MyDeliveryCreateSerializer,
    DailyMilkEntrySerializer,
    EmployeeAllocationSerializer,
    DeliverySerializer,
    QuotaSerializer,
)
from .services import (
    create_daily_entry,
    get_entry_by_date,
    list_entries,
    record_delivery,
    list_deliveries,
    get_employee_quota,
    verify_employee_day,
)


def _parse_date(value):
    serializer = DateParamSerializer(data={'date': value})
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data['date']


def _paginated(request, queryset, serializer_class):
    paginator = EnvelopePagination()
    page = paginator.paginate_queryset(queryset, request)
    return paginator.get_paginated_response(serializer_class(page, many=True).data)


# =============================================================================
# Daily entries (admin)
# =============================================================================

@extend_schema(
    methods=['GET'],
    parameters=[
        OpenApiParameter('start_date', str, description='YYYY-MM-DD'),
        OpenApiParameter('end_date', str, description='YYYY-MM-DD'),
        OpenApiParameter('page', int),
        OpenApiParameter('limit', int),
    ],
    responses={200: DailyMilkEntrySerializer(many=True)},
    tags=['daily-milk'],
)
@extend_schema(
    methods=['POST'],
    request=DailyEntryCreateSerializer,
    responses={201: DailyMilkEntrySerializer},
    description="Create the day's entry and split it across employees.",
    tags=['daily-milk'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def daily_entries(request):
    """List daily entries or create one."""
    if request.method == 'GET':
        filter_serializer = DateRangeFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        queryset = list_entries(
            start_date=params.get('start_date'),
            end_date=params.get('end_date'),
        )
        return _paginated(request, queryset, DailyMilkEntrySerializer)

    serializer = DailyEntryCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    entry = create_daily_entry(**serializer.validated_data)
    return success_response(DailyMilkEntrySerializer(entry).data, status=status.HTTP_201_CREATED)


@extend_schema(responses={200: DailyMilkEntrySerializer}, tags=['daily-milk'])
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def daily_entry_by_date(request, date):
    entry = get_entry_by_date(entry_date=_parse_date(date))
    return success_response(DailyMilkEntrySerializer(entry).data)


# =============================================================================
# Deliveries
# =============================================================================

@extend_schema(
    request=DeliveryCreateSerializer,
    responses={201: DeliverySerializer},
    description="Record a delivery on behalf of any employee.",
    tags=['daily-milk'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def record_delivery_view(request):
    serializer = DeliveryCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    delivery = record_delivery(
        consumer_id=data['consumer_id'],
        employee_id=data['employee_id'],
        delivery_date=data['delivery_date'],
        quantity=data['quantity_delivered'],
        principal=request.user,
    )
    return success_response(DeliverySerializer(delivery).data, status=status.HTTP_201_CREATED)


@extend_schema(
    request=MyDeliveryCreateSerializer,
    responses={201: DeliverySerializer},
    description="Record a delivery as the calling employee.",
    tags=['daily-milk'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsEmployeeRole])
def record_my_delivery(request):
    serializer = MyDeliveryCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    delivery = record_delivery(
        consumer_id=data['consumer_id'],
        employee_id=None,
        delivery_date=data['delivery_date'],
        quantity=data['quantity_delivered'],
        principal=request.user,
    )
    return success_response(DeliverySerializer(delivery).data, status=status.HTTP_201_CREATED)


@extend_schema(
    parameters=[
        OpenApiParameter('employee_id', str, description='Admin only'),
        OpenApiParameter('consumer_id', str),
        OpenApiParameter('start_date', str, description='YYYY-MM-DD'),
        OpenApiParameter('end_date', str, description='YYYY-MM-DD'),
        OpenApiParameter('page', int),
        OpenApiParameter('limit', int),
    ],
    responses={200: DeliverySerializer(many=True)},
    description="Deliveries; employees only see their own.",
    tags=['daily-milk'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def deliveries(request):
    filter_serializer = DeliveryFilterSerializer(data=request.query_params)
    filter_serializer.is_valid(raise_exception=True)
    params = filter_serializer.validated_data

    queryset = list_deliveries(
        principal=request.user,
        employee_id=params.get('employee_id'),
        consumer_id=params.get('consumer_id'),
        start_date=params.get('start_date'),
        end_date=params.get('end_date'),
    )
    return _paginated(request, queryset, DeliverySerializer)


@extend_schema(responses={200: QuotaSerializer}, tags=['daily-milk'])
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsEmployeeRole])
def my_quota(request, date):
    """The calling employee's allocation for a date."""
    quota = get_employee_quota(
        employee=request.user.employee_profile,
        quota_date=_parse_date(date),
    )
    return success_response(QuotaSerializer(quota).data)


# =============================================================================
# Verification (admin)
# =============================================================================

@extend_schema(request=None, responses={200: EmployeeAllocationSerializer}, tags=['daily-milk'])
@api_view(['PUT'])
@permission_classes([IsAuthenticated, IsAdminRole])
def verify_employee(request, date, employee_id):
    allocation = verify_employee_day(entry_date=_parse_date(date), employee_id=employee_id)
    return success_response(
        EmployeeAllocationSerializer(allocation).data,
        message='Employee day verified successfully',
    )
