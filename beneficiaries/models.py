"""
Database models for the beneficiary registry.

A :class:`Beneficiary` is a person registered into the B2 programme.
Each beneficiary carries a generated, human readable ``user_id`` and
zero or more :class:`MealRecord` rows, one per calendar day on which a
meal was served.
"""
from __future__ import annotations

from django.db import models


class Beneficiary(models.Model):
    """A registered programme beneficiary.

    ``user_id`` is allocated once at creation time (see
    :mod:`beneficiaries.services.identifiers`) and never changes.
    Phone number, ID number and email are expected to be unique; that is
    checked by the service layer before writes rather than by the
    database.
    """
    user_id = models.CharField(max_length=40, unique=True, editable=False)
    names = models.CharField(max_length=255)
    email = models.EmailField(blank=True, default='', db_index=True)
    phone_number = models.CharField(max_length=32, db_index=True)
    id_number = models.CharField(max_length=64, db_index=True)
    age = models.PositiveIntegerField(null=True, blank=True)
    # Filterable demographic fields are indexed for the listing queries
    sex = models.CharField(max_length=20, blank=True, db_index=True)
    state = models.CharField(max_length=100, blank=True, db_index=True)
    lga = models.CharField(max_length=100, db_index=True, help_text="Local government area")
    community = models.CharField(max_length=255, blank=True)
    religion = models.CharField(max_length=50, blank=True)
    disability = models.CharField(max_length=50, blank=True)
    physical_fitness = models.CharField(max_length=50, blank=True)
    photo = models.CharField(max_length=500, blank=True)
    # Set once a registration card has been issued
    qr_code_url = models.CharField(max_length=500, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name_plural = 'beneficiaries'

    def __str__(self) -> str:
        return f"{self.names} ({self.user_id})"


class MealRecord(models.Model):
    """Meals served to a beneficiary on one calendar day."""
    beneficiary = models.ForeignKey(Beneficiary, on_delete=models.CASCADE, related_name='meal_records')
    date = models.DateField(db_index=True)
    breakfast = models.BooleanField(default=False)
    lunch = models.BooleanField(default=False)
    dinner = models.BooleanField(default=False)

    class Meta:
        unique_together = [('beneficiary', 'date')]
        ordering = ['date']

    def __str__(self) -> str:
        return f"{self.beneficiary_id} on {self.date}"
