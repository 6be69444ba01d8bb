from rest_framework import serializers


class DiagnosisSerializer(serializers.Serializer):
    appointment_id = serializers.IntegerField()
    patient_id = serializers.CharField(max_length=64)
    medical_id = serializers.IntegerField(required=False, allow_null=True)
    doctor_id = serializers.CharField(max_length=64)
    symptoms = serializers.CharField(min_length=1)
    diagnosis = serializers.CharField(min_length=1)
    notes = serializers.CharField(required=False, allow_blank=True)
    prescribed_medications = serializers.CharField(required=False, allow_blank=True)
    follow_up_plan = serializers.CharField(required=False, allow_blank=True)
