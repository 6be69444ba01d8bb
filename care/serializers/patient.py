import bleach
from rest_framework import serializers

from care.models import Gender, Patient


def _clean(v):
    return bleach.clean((v or '').strip(), strip=True)


def _accepted(v):
    if v is False:
        raise serializers.ValidationError('consent must be given')
    return v


class PatientSerializer(serializers.Serializer):
    firstName = serializers.CharField(source='first_name', min_length=2, max_length=30)
    lastName = serializers.CharField(source='last_name', min_length=2, max_length=30)
    dateOfBirth = serializers.DateField(source='date_of_birth')
    gender = serializers.ChoiceField(choices=Gender.choices)
    phone = serializers.CharField(min_length=10, max_length=10)
    email = serializers.EmailField()
    address = serializers.CharField(min_length=5, max_length=500)
    maritalStatus = serializers.ChoiceField(source='marital_status', choices=Patient.MARITAL_CHOICES, required=False)
    nutritionalStatus = serializers.ChoiceField(source='nutritional_status', choices=Patient.NUTRITIONAL_CHOICES, required=False)
    emergencyContactName = serializers.CharField(source='emergency_contact_name', min_length=2, max_length=50)
    emergencyContactNumber = serializers.CharField(source='emergency_contact_number', min_length=10, max_length=10, required=False)
    relation = serializers.ChoiceField(choices=Patient.RELATION_CHOICES, required=False)
    bloodGroup = serializers.CharField(source='blood_group', max_length=5, required=False, allow_blank=True)
    allergies = serializers.CharField(required=False, allow_blank=True)
    medicalConditions = serializers.CharField(source='medical_conditions', required=False, allow_blank=True)
    medicalHistory = serializers.CharField(source='medical_history', required=False, allow_blank=True)
    insuranceProvider = serializers.CharField(source='insurance_provider', required=False, allow_blank=True)
    insuranceNumber = serializers.CharField(source='insurance_number', required=False, allow_blank=True)
    privacyConsent = serializers.BooleanField(source='privacy_consent', required=False)
    serviceConsent = serializers.BooleanField(source='service_consent', required=False)
    medicalConsent = serializers.BooleanField(source='medical_consent', required=False)
    img = serializers.CharField(required=False, allow_blank=True, max_length=512)

    def validate_firstName(self, v):
        v = _clean(v)
        if len(v) < 2:
            raise serializers.ValidationError('First name must be at least 2 characters')
        return v

    def validate_lastName(self, v):
        v = _clean(v)
        if len(v) < 2:
            raise serializers.ValidationError('Last name must be at least 2 characters')
        return v

    def validate_address(self, v):
        return _clean(v)

    def validate_privacyConsent(self, v):
        return _accepted(v)

    def validate_serviceConsent(self, v):
        return _accepted(v)

    def validate_medicalConsent(self, v):
        return _accepted(v)


class PatientUpdateSerializer(PatientSerializer):
    pid = serializers.CharField(max_length=64)
