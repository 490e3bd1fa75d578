from rest_framework import serializers


class BeneficiaryListQuerySerializer(serializers.Serializer):
    """Query string accepted by the listing and export endpoints."""
    searchTerm = serializers.CharField(required=False, allow_blank=True)
    searchType = serializers.CharField(required=False, allow_blank=True)
    page = serializers.IntegerField(required=False, min_value=1, default=1)
    sortBy = serializers.CharField(required=False, allow_blank=True, default='_id')
    sortOrder = serializers.CharField(required=False, allow_blank=True, default='asc')
    disability = serializers.CharField(required=False, allow_blank=True)
    sex = serializers.CharField(required=False, allow_blank=True)
    state = serializers.CharField(required=False, allow_blank=True)
    lga = serializers.CharField(required=False, allow_blank=True)
    community = serializers.CharField(required=False, allow_blank=True)
    religion = serializers.CharField(required=False, allow_blank=True)
    physicalFitness = serializers.CharField(required=False, allow_blank=True)
    registeredUsersOnly = serializers.BooleanField(required=False, default=False)


class ContactSearchQuerySerializer(serializers.Serializer):
    searchTerm = serializers.CharField(
        trim_whitespace=True,
        error_messages={
            'required': 'Please provide a search term (email, phone number or userId)',
            'blank': 'Please provide a search term (email, phone number or userId)',
        },
    )
