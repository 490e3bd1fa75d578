import logging

from django.db import DatabaseError
from django.http import JsonResponse

from ..models import Beneficiary

logger = logging.getLogger(__name__)


def healthz(request):
    """Liveness probe: the registry table must be readable."""
    try:
        registered = Beneficiary.objects.count()
    except DatabaseError as e:
        logger.error("health check failed: %s", e)
        return JsonResponse({'ok': False, 'db': False, 'error': str(e)}, status=503)
    return JsonResponse({'ok': True, 'db': True, 'beneficiaries': registered})
