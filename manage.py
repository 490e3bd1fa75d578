#!/usr/bin/env python
"""
Command line entry point for the B2 registry.

Points Django at ``b2registry.settings`` and hands over to the
management utility, e.g. ``python manage.py migrate`` or
``python manage.py export_beneficiaries --output users.xlsx``.
"""
import os
import sys


def main() -> None:
    """Run administrative tasks for the registry."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'b2registry.settings')
    from django.core.management import execute_from_command_line

    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
