"""
DRF exception handler producing the ``{"success": false, ...}`` envelope.

Configured through ``REST_FRAMEWORK['EXCEPTION_HANDLER']``.
"""

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from .exceptions import ServiceError

logger = logging.getLogger(__name__)


def _first_message(detail):
    """Pull a human readable message out of nested DRF error details."""
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return 'Invalid input.'
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else 'Invalid input.'
    return str(detail)


def service_exception_handler(exc, context):
    """
    Map service and validation errors onto HTTP responses.

    - ServiceError subclasses use their ``status_code`` (400 or 404).
    - Django model validation errors (raised by ``full_clean``) become 400.
    - Everything DRF knows about keeps its status but gets the envelope.
    """
    view = context.get('view')
    view_name = view.__class__.__name__ if view else 'unknown'

    if isinstance(exc, ServiceError):
        logger.info("%s rejected in %s: %s", exc.__class__.__name__, view_name, exc.message)
        return Response(
            {'success': False, 'message': exc.message},
            status=exc.status_code,
        )

    if isinstance(exc, DjangoValidationError):
        errors = exc.message_dict if hasattr(exc, 'error_dict') else {'non_field_errors': exc.messages}
        return Response(
            {'success': False, 'message': _first_message(errors), 'errors': errors},
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        response.data = {
            'success': False,
            'message': _first_message(response.data),
            'errors': response.data,
        }
    else:
        response.data = {
            'success': False,
            'message': _first_message(response.data),
        }
    return response
