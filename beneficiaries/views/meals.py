from rest_framework.decorators import api_view
from rest_framework.response import Response

from ..services import meals


@api_view(['POST'])
def record_meal(request, pk: int):
    """Mark the meal currently being served as received by beneficiary ``pk``.

    Breakfast is served 06:00-11:00, lunch 11:00-16:00 and dinner
    16:00-23:30 server time; requests outside those windows are refused.
    """
    return Response(meals.record_meal(pk))


@api_view(['GET'])
def daily_meal_totals(request):
    """Today's breakfast/lunch/dinner counts and number of distinct diners."""
    return Response(meals.daily_meal_totals())
