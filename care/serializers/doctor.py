import bleach
from rest_framework import serializers

from care.models import Doctor, Weekday

TIME_FORMAT_MESSAGE = 'time must look like HH:MM'


def _hhmm(v):
    parts = (v or '').split(':')
    if len(parts) != 2 or not all(p.isdigit() and len(p) == 2 for p in parts):
        raise serializers.ValidationError(TIME_FORMAT_MESSAGE)
    hours, minutes = int(parts[0]), int(parts[1])
    if hours > 23 or minutes > 59:
        raise serializers.ValidationError(TIME_FORMAT_MESSAGE)
    return v


class WorkingDaySerializer(serializers.Serializer):
    day = serializers.ChoiceField(choices=Weekday.choices)
    start_time = serializers.CharField(max_length=5, validators=[_hhmm])
    close_time = serializers.CharField(max_length=5, validators=[_hhmm])

    def to_internal_value(self, data):
        # the front-end sends "day" capitalised
        if isinstance(data, dict) and isinstance(data.get('day'), str):
            data = {**data, 'day': data['day'].lower()}
        return super().to_internal_value(data)

    def validate(self, attrs):
        if attrs['start_time'] >= attrs['close_time']:
            raise serializers.ValidationError('start_time must be before close_time')
        return attrs


class DoctorCreateSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=2, max_length=50)
    phone = serializers.CharField(min_length=10, max_length=10)
    email = serializers.EmailField()
    address = serializers.CharField(min_length=5, max_length=500)
    specialization = serializers.CharField(min_length=2)
    license_number = serializers.CharField(min_length=2)
    type = serializers.ChoiceField(choices=Doctor.JOB_TYPE_CHOICES, default='FULL')
    department = serializers.CharField(min_length=2)
    img = serializers.CharField(required=False, allow_blank=True, max_length=512)
    password = serializers.CharField(min_length=6, write_only=True, trim_whitespace=False)
    work_schedule = WorkingDaySerializer(many=True, required=False)

    def validate_name(self, v):
        return bleach.clean(v.strip(), strip=True)

    def validate_work_schedule(self, v):
        days = [d['day'] for d in v]
        if len(days) != len(set(days)):
            raise serializers.ValidationError('each weekday may appear only once')
        return v
