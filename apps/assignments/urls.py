from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'assignments'

router = DefaultRouter()
router.register(r'', views.AssignmentViewSet, basename='assignment')

urlpatterns = [
    # GET    /api/assignments/                  - List assignments
    # POST   /api/assignments/                  - Create assignment
    # GET    /api/assignments/my-assignments/   - Employee's own assignments
    # PUT    /api/assignments/{id}/             - Update assignment
    # PATCH  /api/assignments/{id}/             - Partial update
    # DELETE /api/assignments/{id}/             - Delete assignment
    path('', include(router.urls)),
]
