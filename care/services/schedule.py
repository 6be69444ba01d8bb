"""Which doctors work on a given day."""
from __future__ import annotations

from datetime import date, datetime

from django.conf import settings
from django.core.cache import cache
from django.utils import timezone

from care.models import Doctor, Weekday

# Indexed by date.weekday(): Monday is 0.
WEEKDAYS: tuple[Weekday, ...] = (
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
    Weekday.SATURDAY,
    Weekday.SUNDAY,
)

# Size of the public "available today" list.
AVAILABLE_TODAY_LIMIT = 3


def weekday_for(moment: date) -> Weekday:
    if isinstance(moment, datetime) and timezone.is_aware(moment):
        moment = timezone.localtime(moment)
    return WEEKDAYS[moment.weekday()]


def format_doctor_brief(doctor: Doctor, *, with_days: bool = False) -> dict:
    data = {
        'id': doctor.id,
        'name': doctor.name,
        'specialization': doctor.specialization,
        'img': doctor.img,
        'colorCode': doctor.color_code,
    }
    if with_days:
        data['workingDays'] = [
            {'day': wd.day, 'startTime': wd.start_time, 'closeTime': wd.close_time}
            for wd in doctor.working_days.all()
        ]
    return data


def available_cache_key(day: str, limit: int, only_available: bool) -> str:
    return f"doctors:available:day={day}:limit={limit}:avail={int(only_available)}"


def available_doctors(reference_now: date, limit: int, *, only_available: bool = False) -> list[dict]:
    """Doctors holding consultations on the weekday of ``reference_now``."""
    day = weekday_for(reference_now)
    ck = available_cache_key(day.value, limit, only_available)
    cached = cache.get(ck)
    if cached is not None:
        return cached

    qs = Doctor.objects.filter(working_days__day__iexact=day.value)
    if only_available:
        qs = qs.filter(availability_status__iexact='available')
    qs = qs.distinct().order_by('name').prefetch_related('working_days')[:limit]
    data = [format_doctor_brief(d, with_days=True) for d in qs]
    cache.set(ck, data, getattr(settings, 'AVAILABLE_DOCTORS_CACHE_SECONDS', 300))
    return data


def forget_available_doctors() -> None:
    """Drop cached availability lists after a doctor or schedule change."""
    keys = [
        available_cache_key(day.value, limit, flag)
        for day in WEEKDAYS
        for limit in _cached_limits()
        for flag in (False, True)
    ]
    cache.delete_many(keys)


def _cached_limits() -> set[int]:
    return {
        getattr(settings, 'DASHBOARD_DOCTOR_LIMIT', 5),
        getattr(settings, 'PATIENT_DASHBOARD_DOCTOR_LIMIT', 4),
        AVAILABLE_TODAY_LIMIT,
    }

