from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import IsAdminRole
from apps.core.responses import success_response
from .billing import BillingQueries, resolve_period
from .serializers import (
    PeriodQuerySerializer,
    ConsumerBillSerializer,
    MonthlyReportSerializer,
    OutstandingSerializer,
)

PERIOD_PARAMETERS = [
    OpenApiParameter('month', OpenApiTypes.INT, description='Month 1-12 (default: current)'),
    OpenApiParameter('year', OpenApiTypes.INT, description='Year (default: current)'),
    OpenApiParameter('start_date', OpenApiTypes.DATE, description='Range start, used with end_date'),
    OpenApiParameter('end_date', OpenApiTypes.DATE, description='Range end, used with start_date'),
]


def _period_from(request):
    query_serializer = PeriodQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    return resolve_period(**query_serializer.validated_data)


@extend_schema(
    parameters=PERIOD_PARAMETERS,
    responses={200: ConsumerBillSerializer},
    description="Bill for one consumer over a month or date range.",
    tags=['billing'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def consumer_monthly_billing(request, consumer_id):
    """Get one consumer's bill - thin HTTP handler."""
    data = BillingQueries.consumer_monthly_billing(consumer_id, _period_from(request))
    return success_response(data)


@extend_schema(
    parameters=PERIOD_PARAMETERS,
    responses={200: MonthlyReportSerializer},
    description="Billing for every consumer with deliveries in the period.",
    tags=['billing'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def monthly_report(request):
    return success_response(BillingQueries.monthly_report(_period_from(request)))


@extend_schema(
    parameters=PERIOD_PARAMETERS,
    responses={200: OutstandingSerializer},
    description="Amounts due per active consumer, largest first.",
    tags=['billing'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def outstanding(request):
    return success_response(BillingQueries.outstanding(_period_from(request)))
