"""
Spreadsheet export of the registry.

:func:`export_rows` produces plain ordered rows in :data:`COLUMNS`
order; :func:`build_workbook` turns any such rows into ``.xlsx`` bytes
with openpyxl.  The full filtered result set is exported, unpaginated.
"""
from __future__ import annotations

from io import BytesIO
from typing import Iterable, Iterator, NamedTuple

from django.db.models import QuerySet
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from beneficiaries.models import Beneficiary
from beneficiaries.services.queries import FILTER_FIELDS, build_query

EXPORT_FILENAME = 'users.xlsx'
XLSX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
HEADER_FILL = 'FFE0E0E0'


class ExportColumn(NamedTuple):
    header: str
    attr: str
    width: int


COLUMNS = (
    ExportColumn('User ID', 'user_id', 15),
    ExportColumn('Name', 'names', 30),
    ExportColumn('Email', 'email', 30),
    ExportColumn('Phone', 'phone_number', 15),
    ExportColumn('Age', 'age', 10),
    ExportColumn('Gender', 'sex', 10),
    ExportColumn('State', 'state', 15),
    ExportColumn('Lga', 'lga', 20),
    ExportColumn('Community', 'community', 20),
    ExportColumn('Religion', 'religion', 15),
    ExportColumn('Disability', 'disability', 10),
    ExportColumn('Physical Fitness', 'physical_fitness', 15),
    ExportColumn('Photo', 'photo', 50),
)


def export_queryset(params: dict, *, registered_only: bool = False) -> QuerySet:
    # every filter is matched as a trimmed, case-insensitive whole value
    q = build_query(params, registered_only=registered_only, anchored=FILTER_FIELDS)
    return Beneficiary.objects.filter(q).order_by('pk')


def export_rows(qs: QuerySet) -> Iterator[tuple]:
    yield from qs.values_list(*(c.attr for c in COLUMNS)).iterator()


def build_workbook(rows: Iterable[tuple]) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = 'Users'
    ws.append([c.header for c in COLUMNS])
    for index, column in enumerate(COLUMNS, start=1):
        ws.column_dimensions[get_column_letter(index)].width = column.width
    header_font = Font(bold=True)
    header_fill = PatternFill(fill_type='solid', fgColor=HEADER_FILL)
    for cell in ws[1]:
        cell.font = header_font
        cell.fill = header_fill
    for row in rows:
        ws.append(list(row))
    buf = BytesIO()
    wb.save(buf)
    return buf.getvalue()
