from django.urls import path
from . import views

app_name = 'daily_milk'

urlpatterns = [
    # Daily entries (admin)
    path('', views.daily_entries, name='entries'),
    path('date/<str:date>/', views.daily_entry_by_date, name='entry-by-date'),

    # Deliveries
    path('delivery/', views.record_delivery_view, name='delivery'),
    path('my-delivery/', views.record_my_delivery, name='my-delivery'),
    path('deliveries/', views.deliveries, name='deliveries'),
    path('my-quota/<str:date>/', views.my_quota, name='my-quota'),

    # Verification (admin)
    path('verify/<str:date>/<uuid:employee_id>/', views.verify_employee, name='verify'),
]
