from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'consumers'

router = DefaultRouter()
router.register(r'', views.ConsumerViewSet, basename='consumer')

urlpatterns = [
    # GET    /api/consumers/          - List consumers
    # POST   /api/consumers/          - Create consumer
    # GET    /api/consumers/areas/    - Distinct areas
    # GET    /api/consumers/{id}/     - Get consumer
    # PUT    /api/consumers/{id}/     - Update consumer
    # PATCH  /api/consumers/{id}/     - Partial update
    # DELETE /api/consumers/{id}/     - Delete consumer
    path('', include(router.urls)),
]
