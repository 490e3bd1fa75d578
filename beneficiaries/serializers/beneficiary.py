import bleach
from rest_framework import serializers

from beneficiaries.models import Beneficiary, MealRecord


class MealRecordSerializer(serializers.ModelSerializer):
    class Meta:
        model = MealRecord
        fields = ['date', 'breakfast', 'lunch', 'dinner']


class BeneficiarySerializer(serializers.ModelSerializer):
    """Camel-cased representation of a beneficiary.

    ``userId`` and ``mealRecords`` are read-only: the id is allocated by
    the server and meals are only changed through the meal endpoint.
    """
    userId = serializers.CharField(source='user_id', read_only=True)
    phoneNumber = serializers.CharField(source='phone_number', max_length=32)
    idNumber = serializers.CharField(source='id_number', max_length=64)
    physicalFitness = serializers.CharField(source='physical_fitness', required=False, allow_blank=True, max_length=50)
    qrCodeUrl = serializers.CharField(source='qr_code_url', required=False, allow_null=True, allow_blank=True, max_length=500)
    mealRecords = MealRecordSerializer(source='meal_records', many=True, read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Beneficiary
        fields = [
            'id', 'userId', 'names', 'email', 'phoneNumber', 'idNumber', 'age', 'sex',
            'state', 'lga', 'community', 'religion', 'disability', 'physicalFitness',
            'photo', 'qrCodeUrl', 'mealRecords', 'createdAt', 'updatedAt',
        ]

    def validate_names(self, v):
        v = bleach.clean((v or '').strip(), strip=True)
        if len(v) < 2:
            raise serializers.ValidationError('names must be at least 2 characters')
        return v

    def validate_lga(self, v):
        v = bleach.clean((v or '').strip(), strip=True)
        if not v.split():
            raise serializers.ValidationError('lga is required')
        return v

    def validate_community(self, v):
        return bleach.clean((v or '').strip(), strip=True)

    def validate_email(self, v):
        return (v or '').strip().lower()
