"""
Allocation of beneficiary ``user_id`` values.

Identifiers look like ``ISM/B2-25/LS/0001``: programme prefix, two digit
year, the initials of the beneficiary's LGA and a zero padded serial.
All LGAs share a single yearly counter: the next serial is one past the
highest numeric serial issued in the same *year*, whichever LGA it
belongs to.  Serials are compared as numbers, not strings, so ``AM``
after ``LS`` and ``10000`` after ``9999`` both continue the counter.
The read and the insert happen in one transaction and the unique
constraint on ``user_id`` rejects a racing writer that derived the same
serial.
"""
from __future__ import annotations

import logging

from django.db import IntegrityError, transaction
from django.utils import timezone

from beneficiaries.exceptions import AllocationFailed
from beneficiaries.models import Beneficiary

logger = logging.getLogger(__name__)

ID_PREFIX = 'ISM/B2'
SERIAL_WIDTH = 4


def current_time():
    return timezone.localtime()


def lga_initials(lga: str) -> str:
    """``"Lagos State"`` -> ``"LS"``."""
    return ''.join(word[0] for word in lga.split()).upper()


def year_prefix(year: int) -> str:
    return f"{ID_PREFIX}-{year % 100:02d}/"


def format_user_id(year: int, lga: str, serial: int) -> str:
    return f"{year_prefix(year)}{lga_initials(lga)}/{serial:0{SERIAL_WIDTH}d}"


def serial_of(user_id: str) -> int:
    """Trailing numeric component of an identifier, 0 if it has none."""
    tail = user_id.rsplit('/', 1)[-1]
    return int(tail) if tail.isdigit() else 0


def highest_serial_for_year(year: int) -> int:
    # Must run inside a transaction; the row lock is a no-op on SQLite.
    user_ids = (
        Beneficiary.objects.select_for_update()
        .filter(user_id__startswith=year_prefix(year))
        .values_list('user_id', flat=True)
    )
    return max((serial_of(user_id) for user_id in user_ids), default=0)


def allocate_and_create(fields: dict, *, now=None) -> Beneficiary:
    """Insert a beneficiary under the next free identifier for the year.

    Either the new row is committed with its identifier or nothing is
    written and :class:`AllocationFailed` is raised.  There is no retry.
    """
    now = timezone.localtime(now) if now else current_time()
    try:
        with transaction.atomic():
            serial = highest_serial_for_year(now.year) + 1
            user_id = format_user_id(now.year, fields['lga'], serial)
            beneficiary = Beneficiary.objects.create(user_id=user_id, **fields)
    except IntegrityError as exc:
        logger.warning("user id allocation aborted (lga=%r): %s", fields.get('lga'), exc)
        raise AllocationFailed() from exc
    logger.info("allocated %s to beneficiary %s", beneficiary.user_id, beneficiary.pk)
    return beneficiary
