"""
Django admin registrations for the registry.

Beneficiaries can be inspected and corrected through ``/admin/`` with
their meal history shown inline.  ``user_id`` is displayed but cannot
be edited.
"""

from django.contrib import admin

from .models import Beneficiary, MealRecord


class MealRecordInline(admin.TabularInline):
    model = MealRecord
    extra = 0


@admin.register(Beneficiary)
class BeneficiaryAdmin(admin.ModelAdmin):
    list_display = ('user_id', 'names', 'phone_number', 'lga', 'state', 'sex', 'created_at')
    list_filter = ('state', 'lga', 'sex', 'disability')
    search_fields = ('user_id', 'names', 'phone_number', 'id_number', 'email')
    readonly_fields = ('user_id', 'created_at', 'updated_at')
    inlines = [MealRecordInline]


@admin.register(MealRecord)
class MealRecordAdmin(admin.ModelAdmin):
    list_display = ('beneficiary', 'date', 'breakfast', 'lunch', 'dinner')
    list_filter = ('date',)
    search_fields = ('beneficiary__user_id', 'beneficiary__names')
