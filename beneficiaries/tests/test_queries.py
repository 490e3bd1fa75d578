import pytest

from beneficiaries.models import Beneficiary
from beneficiaries.services.queries import (
    ITEMS_PER_PAGE,
    build_query,
    list_beneficiaries,
    ordering_for,
)

from .factories import make_beneficiary

pytestmark = pytest.mark.django_db


def _params(**kw):
    params = {'page': 1, 'sortBy': '_id', 'sortOrder': 'asc'}
    params.update(kw)
    return params


def test_pagination_over_45_records():
    for _ in range(45):
        make_beneficiary()
    seen = []
    for page, expected in [(1, 20), (2, 20), (3, 5)]:
        users, pagination = list_beneficiaries(_params(page=page))
        assert len(users) == expected
        assert pagination == {
            'currentPage': page,
            'totalPages': 3,
            'totalItems': 45,
            'itemsPerPage': ITEMS_PER_PAGE,
        }
        seen.extend(u.pk for u in users)
    assert len(set(seen)) == 45


def test_empty_registry_has_zero_pages():
    users, pagination = list_beneficiaries(_params())
    assert users == []
    assert pagination['totalPages'] == 0
    assert pagination['totalItems'] == 0


def test_unknown_sort_field_falls_back_to_id():
    assert ordering_for('password', 'desc') == ['-pk']
    assert ordering_for(None, None) == ['pk']
    a = make_beneficiary(names='Zainab')
    b = make_beneficiary(names='Adamu')
    users, _ = list_beneficiaries(_params(sortBy='unknownField'))
    assert [u.pk for u in users] == [a.pk, b.pk]


def test_sort_by_names_descending():
    make_beneficiary(names='Bola')
    make_beneficiary(names='Chidi')
    make_beneficiary(names='Ada')
    users, _ = list_beneficiaries(_params(sortBy='names', sortOrder='desc'))
    assert [u.names for u in users] == ['Chidi', 'Bola', 'Ada']


def test_sort_order_other_than_desc_is_ascending():
    make_beneficiary(age=40)
    make_beneficiary(age=20)
    users, _ = list_beneficiaries(_params(sortBy='age', sortOrder='DESCENDING'))
    assert [u.age for u in users] == [20, 40]


def test_search_is_case_insensitive_substring_on_named_field():
    hit = make_beneficiary(names='Ngozi Okafor')
    make_beneficiary(names='Musa Sani', community='Okafor Town')
    users, pagination = list_beneficiaries(_params(searchTerm='okaf', searchType='names'))
    assert [u.pk for u in users] == [hit.pk]
    assert pagination['totalItems'] == 1


def test_unknown_search_type_is_ignored():
    make_beneficiary()
    make_beneficiary()
    _, pagination = list_beneficiaries(_params(searchTerm='x', searchType='password'))
    assert pagination['totalItems'] == 2


def test_filters_match_exactly_and_combine():
    target = make_beneficiary(sex='Female', disability='No', lga='Ikeja')
    make_beneficiary(sex='Female', disability='Yes', lga='Ikeja')
    make_beneficiary(sex='Male', disability='No', lga='Ikeja')
    make_beneficiary(sex='Female', disability='No', lga='ikeja')
    users, _ = list_beneficiaries(_params(sex='Female', disability='No', lga='Ikeja'))
    assert [u.pk for u in users] == [target.pk]


def test_physical_fitness_filter_uses_model_field():
    fit = make_beneficiary(physical_fitness='Fit')
    make_beneficiary(physical_fitness='Unfit')
    users, _ = list_beneficiaries(_params(physicalFitness='Fit'))
    assert [u.pk for u in users] == [fit.pk]


def test_registered_listing_requires_qr_code():
    card = make_beneficiary(qr_code_url='https://cdn.example.org/qr/1.png')
    make_beneficiary(qr_code_url=None)
    make_beneficiary(qr_code_url='')
    users, pagination = list_beneficiaries(_params(), registered_only=True)
    assert [u.pk for u in users] == [card.pk]
    assert pagination['totalItems'] == 1


def test_registered_listing_matches_lga_as_trimmed_whole_value():
    exact = make_beneficiary(lga='Lagos Island', qr_code_url='qr/1')
    padded = make_beneficiary(lga='  lagos island ', qr_code_url='qr/2')
    make_beneficiary(lga='Lagos Island East', qr_code_url='qr/3')
    make_beneficiary(lga='Lagos Island', qr_code_url=None)
    users, _ = list_beneficiaries(_params(lga='  LAGOS island '), registered_only=True)
    assert {u.pk for u in users} == {exact.pk, padded.pk}


def test_anchored_match_escapes_regex_characters():
    make_beneficiary(lga='Ado.Ekiti')
    make_beneficiary(lga='AdoXEkiti')
    q = build_query({'lga': 'Ado.Ekiti'}, anchored=['lga'])
    assert list(Beneficiary.objects.filter(q).values_list('lga', flat=True)) == ['Ado.Ekiti']
