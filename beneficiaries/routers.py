"""
URL mappings for the beneficiary registry API.

Every route lives under ``api/users``.  Trailing slashes are omitted
on purpose (``APPEND_SLASH = False``).  Single records are addressed by
their numeric database id because ``userId`` values contain slashes.
"""
from django.urls import path, include

from .views import health
from .views.beneficiaries import (
    beneficiaries,
    beneficiary_detail,
    search_beneficiary,
    registered_beneficiaries,
    record_health,
    record_attendance,
)
from .views.meals import record_meal, daily_meal_totals
from .views.export import download_beneficiaries


urlpatterns = [
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz),
    # Registry
    path('api/users', beneficiaries, name='beneficiaries'),
    path('api/users/search', search_beneficiary, name='beneficiary-search'),
    path('api/users/numbers', registered_beneficiaries, name='beneficiaries-registered'),
    path('api/users/download', download_beneficiaries, name='beneficiaries-download'),
    path('api/users/meals', daily_meal_totals, name='meal-totals'),
    path('api/users/<int:pk>', beneficiary_detail, name='beneficiary-detail'),
    # Per-beneficiary actions
    path('api/users/<int:pk>/meals', record_meal, name='beneficiary-meals'),
    path('api/users/<int:pk>/health', record_health, name='beneficiary-health'),
    path('api/users/<int:pk>/attendance', record_attendance, name='beneficiary-attendance'),
]
