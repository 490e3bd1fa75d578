import logging
from typing import Optional

from django.db.models import Q
from rest_framework.exceptions import NotFound

from beneficiaries.exceptions import DuplicateValue
from beneficiaries.models import Beneficiary
from beneficiaries.services.identifiers import allocate_and_create

logger = logging.getLogger(__name__)

# (model field, lookup, label used in error messages)
UNIQUE_FIELDS = (
    ('phone_number', 'phone_number', 'Phone number'),
    ('id_number', 'id_number', 'Id number'),
    ('email', 'email__iexact', 'Email'),
)


def ensure_unique(fields: dict, *, exclude_pk: Optional[int] = None) -> None:
    """Raise :class:`DuplicateValue` if another record already uses a unique value.

    Blank values are not checked.  With ``exclude_pk`` the record being
    edited is ignored.
    """
    for field, lookup, label in UNIQUE_FIELDS:
        value = fields.get(field)
        if not value:
            continue
        qs = Beneficiary.objects.filter(**{lookup: value})
        if exclude_pk is not None:
            qs = qs.exclude(pk=exclude_pk)
        if qs.exists():
            if exclude_pk is None:
                raise DuplicateValue(f'{label} already exists. Please use another')
            raise DuplicateValue(f'{label} is already in use by another user')


def create_beneficiary(fields: dict, *, now=None) -> Beneficiary:
    ensure_unique(fields)
    return allocate_and_create(fields, now=now)


def get_beneficiary(pk: int) -> Beneficiary:
    beneficiary = Beneficiary.objects.prefetch_related('meal_records').filter(pk=pk).first()
    if not beneficiary:
        raise NotFound('No user found with that ID')
    return beneficiary


def update_beneficiary(beneficiary: Beneficiary, fields: dict) -> Beneficiary:
    ensure_unique(fields, exclude_pk=beneficiary.pk)
    # user_id is never part of ``fields``; the serializer marks it read-only
    for field, value in fields.items():
        setattr(beneficiary, field, value)
    beneficiary.save()
    return beneficiary


def delete_beneficiary(pk: int) -> None:
    beneficiary = Beneficiary.objects.filter(pk=pk).first()
    if not beneficiary:
        raise NotFound('No document found with that ID')
    user_id = beneficiary.user_id
    beneficiary.delete()
    logger.info("deleted beneficiary %s (%s)", pk, user_id)


def find_by_contact(term: str) -> Beneficiary:
    """Exact lookup by email (any case), phone number or user id; lowest id wins."""
    beneficiary = (
        Beneficiary.objects.prefetch_related('meal_records')
        .filter(Q(email__iexact=term) | Q(phone_number=term) | Q(user_id=term))
        .order_by('pk')
        .first()
    )
    if not beneficiary:
        raise NotFound('No user found with this user id, email or phone number')
    return beneficiary
