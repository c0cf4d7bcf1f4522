from django.conf import settings
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class EnvelopePagination(PageNumberPagination):
    """
    Page/limit pagination wrapped in the API envelope.

    Query Parameters:
        page (int): 1-based page number
        limit (int): page size (default ``DEFAULT_PAGE_SIZE``)

    Response::

        {"success": true, "data": [...], "totalPages": 3, "currentPage": 1, "total": 25}
    """

    page_size = settings.DEFAULT_PAGE_SIZE
    page_size_query_param = 'limit'
    max_page_size = settings.MAX_PAGE_SIZE

    def get_paginated_response(self, data):
        return Response({
            'success': True,
            'data': data,
            'totalPages': self.page.paginator.num_pages,
            'currentPage': self.page.number,
            'total': self.page.paginator.count,
        })

    def get_paginated_response_schema(self, schema):
        return {
            'type': 'object',
            'properties': {
                'success': {'type': 'boolean'},
                'data': schema,
                'totalPages': {'type': 'integer'},
                'currentPage': {'type': 'integer'},
                'total': {'type': 'integer'},
            },
        }
