"""
URL configuration for the milk distribution API.

All endpoints live under ``/api/``; the Django admin is at ``/admin/``.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from config.views import health_check

urlpatterns = [
    # Health check
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Authentication
    path('api/auth/', include('apps.accounts.urls')),

    # API endpoints
    path('api/employees/', include('apps.employees.urls')),
    path('api/consumers/', include('apps.consumers.urls')),
    path('api/assignments/', include('apps.assignments.urls')),
    path('api/daily-milk/', include('apps.daily_milk.urls')),
    path('api/billing/', include('apps.billing.urls')),
    path('api/settings/', include('apps.system_settings.urls')),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
