from django.urls import path
from . import views

app_name = 'billing'

urlpatterns = [
    # GET /api/billing/consumer/{id}/monthly/?month=&year=  - One consumer's bill
    path('consumer/<uuid:consumer_id>/monthly/', views.consumer_monthly_billing, name='consumer-monthly'),
    # GET /api/billing/report/?month=&year=                 - All consumers
    path('report/', views.monthly_report, name='report'),
    # GET /api/billing/outstanding/?month=&year=            - Amounts due
    path('outstanding/', views.outstanding, name='outstanding'),
]
