"""
Daily meal tracking.

The meal being served is decided by the server's local wall-clock time,
never by the caller.  Each beneficiary may receive each meal once per
calendar day.  ``current_time`` is the clock used when no explicit
moment is passed in.
"""
from __future__ import annotations

import logging

from django.db import transaction
from django.db.models import Count, Q
from django.utils import timezone
from rest_framework.exceptions import NotFound

from beneficiaries.exceptions import MealAlreadyRecorded, OutsideServiceHours
from beneficiaries.models import Beneficiary, MealRecord

logger = logging.getLogger(__name__)

BREAKFAST = 'breakfast'
LUNCH = 'lunch'
DINNER = 'dinner'

# [start, end) in fractional hours of local time
MEAL_WINDOWS = (
    (6, 11, BREAKFAST),
    (11, 16, LUNCH),
    (16, 23.5, DINNER),
)


def current_time():
    return timezone.localtime()


def meal_slot_for(moment) -> str:
    """Return the meal served at ``moment`` or raise :class:`OutsideServiceHours`."""
    hour = moment.hour + moment.minute / 60 + moment.second / 3600
    for start, end, slot in MEAL_WINDOWS:
        if start <= hour < end:
            return slot
    raise OutsideServiceHours()


def _local(now):
    return timezone.localtime(now or current_time())


def record_meal(beneficiary_id: int, *, now=None) -> dict:
    now = _local(now)
    meal_type = meal_slot_for(now)
    today = now.date()

    with transaction.atomic():
        beneficiary = Beneficiary.objects.select_for_update().filter(pk=beneficiary_id).first()
        if not beneficiary:
            raise NotFound('User not found')
        record, _ = MealRecord.objects.get_or_create(beneficiary=beneficiary, date=today)
        if getattr(record, meal_type):
            raise MealAlreadyRecorded(f'{meal_type.capitalize()} has already been recorded for today')
        setattr(record, meal_type, True)
        record.save(update_fields=[meal_type])

    logger.info("recorded %s for %s on %s", meal_type, beneficiary.user_id, today)
    return {
        'message': f'{meal_type} recorded successfully',
        'mealType': meal_type,
        'date': today.isoformat(),
    }


def daily_meal_totals(*, now=None) -> dict:
    """Count today's breakfasts, lunches, dinners and distinct diners."""
    today = _local(now).date()
    totals = MealRecord.objects.filter(date=today).aggregate(
        breakfast=Count('id', filter=Q(breakfast=True)),
        lunch=Count('id', filter=Q(lunch=True)),
        dinner=Count('id', filter=Q(dinner=True)),
        totalUniqueUsers=Count('beneficiary', distinct=True),
    )
    return {'date': today.isoformat(), **totals}
