from pathlib import Path

from django.core.management.base import BaseCommand

from beneficiaries.services.export import build_workbook, export_queryset, export_rows


class Command(BaseCommand):
    help = "Write the beneficiary registry to an .xlsx file (same columns as /api/users/download)."

    def add_arguments(self, parser):
        parser.add_argument('--output', default='users.xlsx', help='Destination file path')
        parser.add_argument('--registered-only', action='store_true', help='Only beneficiaries with a QR card')
        parser.add_argument('--lga', default='', help='Restrict to one LGA (case-insensitive)')
        parser.add_argument('--state', default='', help='Restrict to one state (case-insensitive)')

    def handle(self, *args, **opts):
        params = {'lga': opts['lga'], 'state': opts['state']}
        qs = export_queryset(params, registered_only=opts['registered_only'])
        count = qs.count()
        output = Path(opts['output'])
        output.write_bytes(build_workbook(export_rows(qs)))
        self.stdout.write(self.style.SUCCESS(f"Exported {count} beneficiaries to {output}"))
