"""
Search, filter, sort and pagination over the registry.

Parameters use the API (camelCase) names.  Two listing flavours share
:func:`build_query`:

* the plain listing matches every filter exactly;
* the registered listing only includes beneficiaries with a
  ``qr_code_url`` and matches ``lga`` as a trimmed, anchored,
  case-insensitive whole string.
"""
from __future__ import annotations

import math
import re
from typing import Iterable

from django.db.models import Q, QuerySet

from beneficiaries.models import Beneficiary

ITEMS_PER_PAGE = 20

FILTER_FIELDS = {
    'disability': 'disability',
    'sex': 'sex',
    'state': 'state',
    'lga': 'lga',
    'community': 'community',
    'religion': 'religion',
    'physicalFitness': 'physical_fitness',
}

SEARCH_FIELDS = {
    'userId': 'user_id',
    'names': 'names',
    'email': 'email',
    'phoneNumber': 'phone_number',
    'idNumber': 'id_number',
    **FILTER_FIELDS,
}

SORT_FIELDS = {
    '_id': 'pk',
    'userId': 'user_id',
    'names': 'names',
    'email': 'email',
    'phoneNumber': 'phone_number',
    'age': 'age',
    'sex': 'sex',
    'state': 'state',
    'community': 'community',
    'disability': 'disability',
}
DEFAULT_SORT = '_id'


def registered_only_q() -> Q:
    return Q(qr_code_url__isnull=False) & ~Q(qr_code_url='')


def whole_value_q(field: str, value: str) -> Q:
    return Q(**{f'{field}__iregex': rf'^\s*{re.escape(value.strip())}\s*$'})


def build_query(params: dict, *, registered_only: bool = False, anchored: Iterable[str] = ()) -> Q:
    """Combine search, filters and the registration restriction into one ``Q``.

    ``anchored`` names the filters matched with :func:`whole_value_q`
    instead of exact equality.  A ``searchType`` outside
    :data:`SEARCH_FIELDS` is ignored.
    """
    anchored = set(anchored)
    q = Q()
    if registered_only:
        q &= registered_only_q()

    search_term = params.get('searchTerm')
    search_field = SEARCH_FIELDS.get(params.get('searchType') or '')
    if search_term and search_field:
        q &= Q(**{f'{search_field}__icontains': search_term})

    for name, field in FILTER_FIELDS.items():
        value = params.get(name)
        if not value:
            continue
        if name in anchored:
            q &= whole_value_q(field, value)
        else:
            q &= Q(**{field: value})
    return q


def ordering_for(sort_by: str | None, sort_order: str | None) -> list[str]:
    field = SORT_FIELDS.get(sort_by or DEFAULT_SORT, SORT_FIELDS[DEFAULT_SORT])
    direction = '-' if sort_order == 'desc' else ''
    ordering = [f'{direction}{field}']
    if field != 'pk':
        # stable pages when the sort key has duplicates
        ordering.append('pk')
    return ordering


def paginate(qs: QuerySet, page: int) -> tuple[list, dict]:
    total = qs.count()
    start = (page - 1) * ITEMS_PER_PAGE
    items = list(qs[start:start + ITEMS_PER_PAGE])
    pagination = {
        'currentPage': page,
        'totalPages': math.ceil(total / ITEMS_PER_PAGE),
        'totalItems': total,
        'itemsPerPage': ITEMS_PER_PAGE,
    }
    return items, pagination


def list_beneficiaries(params: dict, *, registered_only: bool = False) -> tuple[list[Beneficiary], dict]:
    anchored = ('lga',) if registered_only else ()
    q = build_query(params, registered_only=registered_only, anchored=anchored)
    qs = (
        Beneficiary.objects.filter(q)
        .prefetch_related('meal_records')
        .order_by(*ordering_for(params.get('sortBy'), params.get('sortOrder')))
    )
    return paginate(qs, params.get('page') or 1)
