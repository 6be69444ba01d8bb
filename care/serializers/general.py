from rest_framework import serializers

from care.models import Service

RECORD_KINDS = ('doctor', 'staff', 'patient', 'payment')


class ListQuerySerializer(serializers.Serializer):
    # page and limit stay lenient; the pagination helper normalises them
    page = serializers.CharField(required=False, allow_blank=True)
    limit = serializers.CharField(required=False, allow_blank=True)
    search = serializers.CharField(required=False, allow_blank=True, max_length=100)
    id = serializers.CharField(required=False, allow_blank=True, max_length=64)


class ServiceSerializer(serializers.Serializer):
    service_name = serializers.CharField(min_length=1, max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    category = serializers.ChoiceField(choices=Service.CATEGORY_CHOICES, default='CONSULTATION')
    duration = serializers.IntegerField(required=False, allow_null=True, min_value=1)


class RatingSerializer(serializers.Serializer):
    patient_id = serializers.CharField(max_length=64, required=False)
    staff_id = serializers.CharField(max_length=64)
    rating = serializers.IntegerField(min_value=1, max_value=5)
    comment = serializers.CharField(min_length=1, max_length=500)


class DeleteRecordSerializer(serializers.Serializer):
    id = serializers.CharField(max_length=64)
    deleteType = serializers.ChoiceField(choices=[(k, k) for k in RECORD_KINDS])
