import bleach
from rest_framework import serializers

from care.models import Role, Staff


class StaffCreateSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=2, max_length=50)
    phone = serializers.CharField(min_length=10, max_length=10)
    email = serializers.EmailField()
    address = serializers.CharField(min_length=5, max_length=500)
    role = serializers.ChoiceField(choices=[(Role.STAFF, 'Staff'), (Role.DOCTOR, 'Doctor'), (Role.ADMIN, 'Administrator')])
    license_number = serializers.CharField(required=False, allow_blank=True)
    department = serializers.CharField(required=False, allow_blank=True)
    img = serializers.CharField(required=False, allow_blank=True, max_length=512)
    status = serializers.ChoiceField(choices=Staff.STATUS_CHOICES, default='ACTIVE')
    salary = serializers.DecimalField(max_digits=12, decimal_places=2, required=False, allow_null=True)
    hire_date = serializers.DateField(required=False, allow_null=True)
    password = serializers.CharField(min_length=6, write_only=True, trim_whitespace=False)

    def validate_name(self, v):
        return bleach.clean(v.strip(), strip=True)
