import logging

from django.http import JsonResponse
from django.utils import timezone

from apps.core.checks import probe_database

logger = logging.getLogger(__name__)


def health_check(request):
    """Liveness probe that also reports whether the database answers."""
    problem = probe_database()
    if problem:
        logger.error("Health check failed: %s", problem)
        return JsonResponse({
            'success': False,
            'status': 'unavailable',
            'database': 'unreachable',
        }, status=503)

    return JsonResponse({
        'success': True,
        'status': 'ok',
        'database': 'ok',
        'timestamp': timezone.now().isoformat(),
    })


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'success': False,
        'message': 'Not found',
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'success': False,
        'message': 'Internal server error',
    }, status=500)
