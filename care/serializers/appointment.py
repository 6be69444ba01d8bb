from rest_framework import serializers

from care.models import AppointmentStatus


class AppointmentCreateSerializer(serializers.Serializer):
    doctor_id = serializers.CharField(max_length=64)
    patient_id = serializers.CharField(max_length=64, required=False)
    service_id = serializers.IntegerField(required=False, allow_null=True)
    appointment_date = serializers.DateTimeField()
    time = serializers.CharField(max_length=5)
    type = serializers.CharField(min_length=1, max_length=64)
    note = serializers.CharField(required=False, allow_blank=True)


class AppointmentStatusSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    status = serializers.ChoiceField(choices=AppointmentStatus.choices)
    reason = serializers.CharField(required=False, allow_blank=True)


class VitalSignsSerializer(serializers.Serializer):
    patient_id = serializers.CharField(max_length=64)
    medical_id = serializers.IntegerField(required=False, allow_null=True)
    body_temperature = serializers.FloatField(min_value=30, max_value=45)
    systolic = serializers.IntegerField(min_value=0)
    diastolic = serializers.IntegerField(min_value=0)
    heart_rate = serializers.CharField(max_length=20)
    respiratory_rate = serializers.IntegerField(required=False, allow_null=True, min_value=0)
    oxygen_saturation = serializers.IntegerField(required=False, allow_null=True, min_value=0, max_value=100)
    weight = serializers.FloatField(min_value=0)
    height = serializers.FloatField(min_value=0)
