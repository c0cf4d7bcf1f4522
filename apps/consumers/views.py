from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import IsAdminRole
from apps.core.pagination import EnvelopePagination
from apps.core.responses import success_response, paginate
from .serializers import (
    ConsumerSerializer,
    ConsumerCreateSerializer,
    ConsumerUpdateSerializer,
    ConsumerFilterSerializer,
)
from .services import (
    get_consumer,
    list_consumers,
    list_areas,
    create_consumer,
    update_consumer,
    delete_consumer,
)


class ConsumerViewSet(viewsets.GenericViewSet):
    """
    ViewSet for consumer management (admin only).

    list: Get consumers (search, area, is_active filters)
    create: Create a consumer (rate defaults to the system rate)
    retrieve: Get a specific consumer
    update: Update a consumer
    partial_update: Partially update a consumer
    destroy: Delete a consumer without deliveries
    areas: Distinct list of areas
    """

    serializer_class = ConsumerSerializer
    permission_classes = [IsAuthenticated, IsAdminRole]
    pagination_class = EnvelopePagination

    def get_queryset(self):
        filter_serializer = ConsumerFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        return list_consumers(
            search=params.get('search'),
            area=params.get('area'),
            is_active=params.get('is_active'),
        )

    @extend_schema(
        parameters=[
            OpenApiParameter('search', str, description='Name, mobile or address'),
            OpenApiParameter('area', str, description='Exact area'),
            OpenApiParameter('is_active', bool),
        ]
    )
    def list(self, request):
        return paginate(self, self.get_queryset(), ConsumerSerializer)

    @extend_schema(request=ConsumerCreateSerializer, responses={201: ConsumerSerializer})
    def create(self, request):
        serializer = ConsumerCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        consumer = create_consumer(**serializer.validated_data)
        return success_response(ConsumerSerializer(consumer).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        return success_response(ConsumerSerializer(get_consumer(consumer_id=pk)).data)

    @extend_schema(request=ConsumerUpdateSerializer, responses={200: ConsumerSerializer})
    def update(self, request, pk=None, partial=False):
        serializer = ConsumerUpdateSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        consumer = update_consumer(consumer_id=pk, **serializer.validated_data)
        return success_response(ConsumerSerializer(consumer).data)

    @extend_schema(request=ConsumerUpdateSerializer, responses={200: ConsumerSerializer})
    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk, partial=True)

    def destroy(self, request, pk=None):
        delete_consumer(consumer_id=pk)
        return success_response(message='Consumer deleted successfully')

    @extend_schema(responses={200: {'type': 'array', 'items': {'type': 'string'}}})
    @action(detail=False, methods=['get'])
    def areas(self, request):
        """Get the distinct consumer areas."""
        return success_response(list_areas())
