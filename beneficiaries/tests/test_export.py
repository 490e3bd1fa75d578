from io import BytesIO

import pytest
from django.core.management import call_command
from openpyxl import load_workbook

from beneficiaries.services.export import COLUMNS, build_workbook, export_queryset, export_rows

from .factories import make_beneficiary

pytestmark = pytest.mark.django_db

HEADERS = [
    'User ID', 'Name', 'Email', 'Phone', 'Age', 'Gender', 'State', 'Lga',
    'Community', 'Religion', 'Disability', 'Physical Fitness', 'Photo',
]


def _sheet(content: bytes):
    return load_workbook(BytesIO(content)).active


def test_rows_follow_column_order():
    b = make_beneficiary(
        user_id='ISM/B2-25/IK/0001', names='Kemi Ade', email='kemi@example.org',
        phone_number='08030000100', age=29, sex='Female', state='Lagos', lga='Ikeja',
        community='Alausa', religion='Islam', disability='No', physical_fitness='Fit',
        photo='p/1.jpg',
    )
    rows = list(export_rows(export_queryset({})))
    assert rows == [(
        b.user_id, 'Kemi Ade', 'kemi@example.org', '08030000100', 29, 'Female', 'Lagos',
        'Ikeja', 'Alausa', 'Islam', 'No', 'Fit', 'p/1.jpg',
    )]


def test_workbook_header_and_styles():
    make_beneficiary(names='Row One')
    ws = _sheet(build_workbook(export_rows(export_queryset({}))))
    assert ws.title == 'Users'
    assert [c.value for c in ws[1]] == HEADERS
    assert ws['A1'].font.bold
    assert ws['A1'].fill.fgColor.rgb == 'FFE0E0E0'
    assert ws.column_dimensions['M'].width == COLUMNS[-1].width
    assert ws['B2'].value == 'Row One'


def test_export_filters_are_trimmed_and_case_insensitive():
    make_beneficiary(state='Lagos', lga='Ikeja', qr_code_url='qr/1')
    make_beneficiary(state='lagos ', lga='Ikeja')
    make_beneficiary(state='Ogun', lga='Ikeja', qr_code_url='qr/2')
    assert export_queryset({'state': 'LAGOS'}).count() == 2
    assert export_queryset({'state': 'LAGOS'}, registered_only=True).count() == 1


def test_export_is_not_paginated():
    for _ in range(25):
        make_beneficiary()
    ws = _sheet(build_workbook(export_rows(export_queryset({}))))
    assert ws.max_row == 26


def test_download_endpoint(api_client):
    make_beneficiary(qr_code_url='qr/1')
    make_beneficiary()
    response = api_client.get('/api/users/download', {'registeredUsersOnly': 'true'})
    assert response.status_code == 200
    assert response['Content-Type'] == 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    assert response['Content-Disposition'] == 'attachment; filename=users.xlsx'
    ws = _sheet(response.content)
    assert ws.max_row == 2


def test_export_command_writes_file(tmp_path):
    make_beneficiary(lga='Epe', qr_code_url='qr/1')
    make_beneficiary(lga='Ikeja', qr_code_url='qr/2')
    out = tmp_path / 'registry.xlsx'
    call_command('export_beneficiaries', '--output', str(out), '--registered-only', '--lga', 'epe')
    ws = _sheet(out.read_bytes())
    assert [c.value for c in ws[1]] == HEADERS
    assert ws.max_row == 2
    assert ws['H2'].value == 'Epe'
