from django.http import HttpResponse
from rest_framework.decorators import api_view

from ..serializers.query import BeneficiaryListQuerySerializer
from ..services.export import (
    EXPORT_FILENAME,
    XLSX_CONTENT_TYPE,
    build_workbook,
    export_queryset,
    export_rows,
)


@api_view(['GET'])
def download_beneficiaries(request):
    """Download the filtered registry as an Excel workbook.

    Accepts the listing filters plus ``registeredUsersOnly=true`` to
    restrict the export to beneficiaries holding a QR card.
    """
    q = BeneficiaryListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    params = q.validated_data
    qs = export_queryset(params, registered_only=params.get('registeredUsersOnly', False))
    resp = HttpResponse(build_workbook(export_rows(qs)), content_type=XLSX_CONTENT_TYPE)
    resp['Content-Disposition'] = f'attachment; filename={EXPORT_FILENAME}'
    return resp
