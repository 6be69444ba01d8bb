"""Doctor profiles, working days and ratings."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Avg, Count
from rest_framework.exceptions import NotFound, ValidationError

from care.models import Doctor, Rating, Role, WorkingDay
from care.services.appointments import format_appointment
from care.services.colors import color_for
from care.services.pagination import Page, paginate, search_filter
from care.services.schedule import forget_available_doctors

User = get_user_model()

DOCTOR_SEARCH_FIELDS = ('name', 'specialization', 'email')
LATEST_APPOINTMENTS = 10


def format_working_day(wd: WorkingDay) -> dict:
    return {'id': wd.id, 'day': wd.day, 'startTime': wd.start_time, 'closeTime': wd.close_time}


def format_doctor(d: Doctor) -> dict:
    return {
        'id': d.id,
        'userId': d.user_id,
        'name': d.name,
        'email': d.email,
        'phone': d.phone,
        'address': d.address,
        'specialization': d.specialization,
        'licenseNumber': d.license_number,
        'department': d.department,
        'type': d.type,
        'img': d.img,
        'colorCode': d.color_code,
        'availabilityStatus': d.availability_status,
        'workingDays': [format_working_day(wd) for wd in d.working_days.all()],
        'createdAt': d.created_at.isoformat() if d.created_at else None,
    }


def list_doctors(*, page=1, limit=None, search: Optional[str]=None) -> tuple[Page, list[dict]]:
    qs = (
        Doctor.objects.filter(search_filter(search, DOCTOR_SEARCH_FIELDS))
        .prefetch_related('working_days')
        .order_by('name')
    )
    result = paginate(qs, page, limit)
    return result, [format_doctor(d) for d in result.rows]


def all_doctors() -> list[dict]:
    return [
        {'id': d.id, 'name': d.name, 'specialization': d.specialization, 'img': d.img,
         'colorCode': d.color_code, 'department': d.department}
        for d in Doctor.objects.order_by('name')
    ]


def get_doctor(doctor_id: str) -> dict:
    doctor = Doctor.objects.prefetch_related('working_days').filter(id=doctor_id).first()
    if not doctor:
        raise NotFound('Doctor not found')
    latest = (
        doctor.appointments.select_related('patient', 'doctor')
        .order_by('-appointment_date')[:LATEST_APPOINTMENTS]
    )
    return {
        'data': format_doctor(doctor),
        'appointments': [format_appointment(a) for a in latest],
        'totalAppointment': doctor.appointments.count(),
    }


def create_doctor(data: dict, work_schedule: list[dict]) -> Doctor:
    """Create the doctor's login, profile and weekly schedule together."""
    data = dict(data)
    password = data.pop('password')
    if User.objects.filter(username=data['email']).exists() or Doctor.objects.filter(email=data['email']).exists():
        raise ValidationError({'email': ['an account with this email already exists']})
    with transaction.atomic():
        user = User.objects.create_user(
            username=data['email'],
            email=data['email'],
            password=password,
            first_name=data['name'],
            role=Role.DOCTOR,
        )
        doctor = Doctor.objects.create(user=user, color_code=color_for(data['email']), **data)
        WorkingDay.objects.bulk_create([
            WorkingDay(doctor=doctor, day=wd['day'], start_time=wd['start_time'], close_time=wd['close_time'])
            for wd in work_schedule
        ])
    forget_available_doctors()
    return doctor


def _one_decimal(value) -> str:
    return str(Decimal(str(value or 0)).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))


def doctor_ratings(doctor_id: str) -> dict:
    if not Doctor.objects.filter(id=doctor_id).exists():
        raise NotFound('Doctor not found')
    qs = Rating.objects.filter(doctor_id=doctor_id).select_related('patient').order_by('-created_at')
    agg = qs.aggregate(total=Count('id'), avg=Avg('rating'))
    return {
        'totalRatings': agg['total'],
        'averageRating': _one_decimal(agg['avg']),
        'ratings': [
            {
                'id': r.id,
                'rating': r.rating,
                'comment': r.comment,
                'createdAt': r.created_at.isoformat(),
                'patient': {'firstName': r.patient.first_name, 'lastName': r.patient.last_name},
            }
            for r in qs
        ],
    }


def doctor_for_user(user) -> Optional[Doctor]:
    return Doctor.objects.filter(user=user).first() if user else None
