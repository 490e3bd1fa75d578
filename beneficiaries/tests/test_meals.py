import pytest
from rest_framework.exceptions import NotFound

from beneficiaries.exceptions import MealAlreadyRecorded, OutsideServiceHours
from beneficiaries.models import MealRecord
from beneficiaries.services.meals import daily_meal_totals, meal_slot_for, record_meal

from .factories import local_dt, make_beneficiary


@pytest.mark.parametrize('hour, minute, slot', [
    (6, 0, 'breakfast'),
    (7, 0, 'breakfast'),
    (10, 59, 'breakfast'),
    (11, 0, 'lunch'),
    (12, 0, 'lunch'),
    (16, 0, 'dinner'),
    (17, 0, 'dinner'),
    (23, 29, 'dinner'),
])
def test_meal_slot_windows(hour, minute, slot):
    assert meal_slot_for(local_dt(2025, 3, 4, hour, minute)) == slot


@pytest.mark.parametrize('hour, minute', [(5, 0), (5, 59), (23, 30), (23, 45), (0, 0)])
def test_outside_service_hours(hour, minute):
    with pytest.raises(OutsideServiceHours):
        meal_slot_for(local_dt(2025, 3, 4, hour, minute))


@pytest.mark.django_db
def test_breakfast_recorded_once_per_day():
    b = make_beneficiary()
    result = record_meal(b.pk, now=local_dt(2025, 3, 4, 7, 0))
    assert result == {
        'message': 'breakfast recorded successfully',
        'mealType': 'breakfast',
        'date': '2025-03-04',
    }
    with pytest.raises(MealAlreadyRecorded) as exc:
        record_meal(b.pk, now=local_dt(2025, 3, 4, 9, 15))
    assert 'Breakfast has already been recorded for today' in str(exc.value.detail)

    records = list(MealRecord.objects.filter(beneficiary=b))
    assert len(records) == 1
    assert records[0].breakfast is True
    assert records[0].lunch is False
    assert records[0].dinner is False


@pytest.mark.django_db
def test_meals_of_one_day_share_a_record():
    b = make_beneficiary()
    record_meal(b.pk, now=local_dt(2025, 3, 4, 7, 0))
    record_meal(b.pk, now=local_dt(2025, 3, 4, 12, 0))
    record_meal(b.pk, now=local_dt(2025, 3, 4, 17, 0))
    record = MealRecord.objects.get(beneficiary=b)
    assert (record.breakfast, record.lunch, record.dinner) == (True, True, True)


@pytest.mark.django_db
def test_next_day_gets_a_new_record():
    b = make_beneficiary()
    record_meal(b.pk, now=local_dt(2025, 3, 4, 7, 0))
    record_meal(b.pk, now=local_dt(2025, 3, 5, 7, 0))
    assert MealRecord.objects.filter(beneficiary=b).count() == 2


@pytest.mark.django_db
def test_record_meal_outside_hours_writes_nothing():
    b = make_beneficiary()
    with pytest.raises(OutsideServiceHours):
        record_meal(b.pk, now=local_dt(2025, 3, 4, 5, 0))
    assert not MealRecord.objects.exists()


@pytest.mark.django_db
def test_record_meal_unknown_beneficiary():
    with pytest.raises(NotFound):
        record_meal(987654, now=local_dt(2025, 3, 4, 7, 0))


@pytest.mark.django_db
def test_daily_totals_are_zero_without_entries():
    make_beneficiary()
    assert daily_meal_totals(now=local_dt(2025, 3, 4, 12, 0)) == {
        'date': '2025-03-04',
        'breakfast': 0,
        'lunch': 0,
        'dinner': 0,
        'totalUniqueUsers': 0,
    }


@pytest.mark.django_db
def test_daily_totals_count_only_today():
    a = make_beneficiary()
    b = make_beneficiary()
    c = make_beneficiary()
    record_meal(a.pk, now=local_dt(2025, 3, 4, 7, 0))
    record_meal(a.pk, now=local_dt(2025, 3, 4, 12, 0))
    record_meal(b.pk, now=local_dt(2025, 3, 4, 12, 30))
    record_meal(c.pk, now=local_dt(2025, 3, 3, 18, 0))
    totals = daily_meal_totals(now=local_dt(2025, 3, 4, 20, 0))
    assert totals == {
        'date': '2025-03-04',
        'breakfast': 1,
        'lunch': 2,
        'dinner': 0,
        'totalUniqueUsers': 2,
    }
