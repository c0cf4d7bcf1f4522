from rest_framework import status as http_status
from rest_framework.response import Response


def success_response(data=None, status=http_status.HTTP_200_OK, message=None):
    """Wrap a payload in the ``{"success": true, "data": ...}`` envelope."""
    body = {'success': True}
    if message:
        body['message'] = message
    if data is not None:
        body['data'] = data
    return Response(body, status=status)


def paginate(view, queryset, serializer_class, context=None):
    """
    Paginate ``queryset`` with the view's paginator and serialize a page.

    Falls back to an unpaginated envelope when the view has no paginator.
    """
    page = view.paginate_queryset(queryset)
    if page is not None:
        serializer = serializer_class(page, many=True, context=context or {})
        return view.get_paginated_response(serializer.data)
    serializer = serializer_class(queryset, many=True, context=context or {})
    return success_response(serializer.data)
