"""
Registry errors and the unified API exception handler.

Every failure leaves the API as ``{"ok": false, "error": {"code",
"message"}}``.  Known conditions are raised as the ``APIException``
subclasses below; anything else is logged and reported as a 500.
"""
import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class DuplicateValue(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Value already exists. Please use another'
    default_code = 'duplicate'


class MealAlreadyRecorded(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Meal has already been recorded for today'
    default_code = 'meal_already_recorded'


class OutsideServiceHours(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Not within meal service hours'
    default_code = 'outside_service_hours'


class AllocationFailed(APIException):
    """The identifier allocation transaction was aborted; nothing was saved."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Could not allocate a user id, please try again'
    default_code = 'allocation_failed'


class NotImplementedFeature(APIException):
    status_code = status.HTTP_501_NOT_IMPLEMENTED
    default_detail = 'This endpoint is not available'
    default_code = 'not_implemented'


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        view = context.get('view')
        logger.exception("unhandled error in %s", type(view).__name__)
        return Response({'ok': False, 'error': {'code': 'server_error', 'message': str(exc)}}, status=500)
    # normalize response
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    else:
        detail = resp.data
    code = getattr(exc, 'default_code', None)
    if code is None:
        code = 'not_found' if resp.status_code == status.HTTP_404_NOT_FOUND else 'api_error'
    return Response({'ok': False, 'error': {'code': code, 'message': detail}}, status=resp.status_code, headers={k: v for k, v in resp.items() if k in ('WWW-Authenticate', 'Retry-After')})
