"""
Beneficiary registration and lookup endpoints.

Operators register beneficiaries, edit and delete them, look a single
person up by email/phone/user id and page through the registry with
search, filters and sorting.  Failures are raised as API exceptions and
rendered by :func:`beneficiaries.exceptions.api_exception_handler`.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from ..exceptions import NotImplementedFeature
from ..serializers.beneficiary import BeneficiarySerializer
from ..serializers.query import BeneficiaryListQuerySerializer, ContactSearchQuerySerializer
from ..services.beneficiaries import (
    create_beneficiary,
    delete_beneficiary,
    find_by_contact,
    get_beneficiary,
    update_beneficiary,
)
from ..services.queries import list_beneficiaries


def _list_params(request) -> dict:
    q = BeneficiaryListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    return q.validated_data


def _body_id(request) -> int:
    raw = request.data.get('id')
    if raw is None:
        raw = request.data.get('_id')
    if raw is None or raw == '':
        raise ValidationError({'id': 'missing id'})
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationError({'id': 'id must be an integer'})


def _create(request):
    data = BeneficiarySerializer(data=request.data)
    data.is_valid(raise_exception=True)
    beneficiary = create_beneficiary(data.validated_data)
    return Response({
        'status': 'success',
        'user': BeneficiarySerializer(beneficiary).data,
        'message': 'User created successfully',
    }, status=status.HTTP_201_CREATED)


def _update(request, pk: int):
    beneficiary = get_beneficiary(pk)
    data = BeneficiarySerializer(beneficiary, data=request.data, partial=True)
    data.is_valid(raise_exception=True)
    updated = update_beneficiary(beneficiary, data.validated_data)
    return Response({
        'status': 'success',
        'message': 'User updated successfully',
        'data': BeneficiarySerializer(updated).data,
    })


@api_view(['GET', 'POST', 'PUT'])
def beneficiaries(request):
    """List (GET), register (POST) or update with the id in the body (PUT).

    Listing query params: ``searchTerm`` + ``searchType`` (substring
    match on one field), exact filters ``disability, sex, state, lga,
    community, religion, physicalFitness``, ``sortBy``/``sortOrder`` and
    a 1-based ``page`` of 20 items.
    """
    if request.method == 'POST':
        return _create(request)
    if request.method == 'PUT':
        return _update(request, _body_id(request))
    users, pagination = list_beneficiaries(_list_params(request))
    return Response({
        'users': BeneficiarySerializer(users, many=True).data,
        'pagination': pagination,
    })


@api_view(['GET', 'PUT', 'DELETE'])
def beneficiary_detail(request, pk: int):
    if request.method == 'PUT':
        return _update(request, pk)
    if request.method == 'DELETE':
        delete_beneficiary(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
    return Response(BeneficiarySerializer(get_beneficiary(pk)).data)


@api_view(['GET'])
def search_beneficiary(request):
    """Find one beneficiary whose email, phone number or userId equals ``searchTerm``."""
    q = ContactSearchQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    beneficiary = find_by_contact(q.validated_data['searchTerm'])
    return Response(BeneficiarySerializer(beneficiary).data)


@api_view(['GET'])
def registered_beneficiaries(request):
    """Page through beneficiaries that have been issued a QR card."""
    users, pagination = list_beneficiaries(_list_params(request), registered_only=True)
    return Response({
        'users': BeneficiarySerializer(users, many=True).data,
        'filteredUsers': pagination['totalItems'],
        'pagination': pagination,
    })


@api_view(['POST'])
def record_health(request, pk: int):
    raise NotImplementedFeature('Health appointments are not recorded by this service')


@api_view(['POST'])
def record_attendance(request, pk: int):
    raise NotImplementedFeature('Attendance is not recorded by this service')
