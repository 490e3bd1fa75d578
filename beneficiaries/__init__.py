"""Beneficiary registry application.

This package contains the models, serializers, services, views and
route registrations for registering B2 programme beneficiaries,
tracking their daily meals and exporting the registry.
"""
