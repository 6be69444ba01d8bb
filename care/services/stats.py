"""
Appointment statistics for the dashboard charts.

``summarize`` folds a list of appointments into per-status totals and a
month-by-month breakdown (January up to the reference month) of all and
completed appointments.  It performs no I/O; callers fetch the
appointments and pass the instant that defines "this year" and "this
month".
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional

import structlog
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from care.models import AppointmentStatus

logger = structlog.get_logger(__name__)

STATUSES: tuple[str, ...] = (
    AppointmentStatus.SCHEDULED,
    AppointmentStatus.PENDING,
    AppointmentStatus.COMPLETED,
    AppointmentStatus.CANCELLED,
)

# English abbreviations; calendar.month_abbr follows the process locale.
MONTH_NAMES: tuple[str, ...] = (
    'Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
    'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec',
)


@dataclass(frozen=True)
class AppointmentSummary:
    appointment_date: Any
    status: Any


@dataclass
class MonthlyBucket:
    name: str
    appointment: int = 0
    completed: int = 0

    def as_dict(self) -> dict:
        return {'name': self.name, 'appointment': self.appointment, 'completed': self.completed}


@dataclass
class AppointmentStats:
    status_counts: dict[str, int]
    monthly: list[MonthlyBucket] = field(default_factory=list)
    unrecognized: int = 0

    def as_payload(self) -> dict:
        return {
            'appointmentCounts': {str(k): v for k, v in self.status_counts.items()},
            'monthlyData': [b.as_dict() for b in self.monthly],
        }


def _field(record: Any, *names: str) -> Any:
    if isinstance(record, Mapping):
        for name in names:
            if name in record:
                return record[name]
        return None
    for name in names:
        if hasattr(record, name):
            return getattr(record, name)
    return None


def _local_date(value: Any, reference: date) -> Optional[date]:
    """Return the calendar date of ``value`` as seen from ``reference``.

    Strings are parsed as ISO dates/datetimes.  Anything that cannot be
    read as a date yields ``None``.
    """
    if isinstance(value, str):
        try:
            value = parse_datetime(value) or parse_date(value)
        except ValueError:
            return None
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            if isinstance(reference, datetime) and timezone.is_aware(reference):
                value = value.astimezone(reference.tzinfo)
            else:
                value = timezone.localtime(value)
        return value.date()
    if isinstance(value, date):
        return value
    return None


def _reference_date(reference_now: date) -> date:
    if isinstance(reference_now, datetime):
        return reference_now.date()
    return reference_now


def empty_monthly(reference_now: date) -> list[MonthlyBucket]:
    """One zeroed bucket per month from January to the reference month."""
    return [MonthlyBucket(name=MONTH_NAMES[i]) for i in range(_reference_date(reference_now).month)]


def summarize(appointments: Iterable[Any], reference_now: date) -> AppointmentStats:
    """Aggregate appointments into status totals and monthly buckets.

    A record is bucketed only when its date falls between the start of the
    reference year and the end of the reference month.  Every record with
    one of the four known statuses is counted in ``status_counts`` whatever
    its date.  Unknown statuses are tallied in ``unrecognized`` and logged.
    """
    today = _reference_date(reference_now)
    monthly = empty_monthly(today)
    counts = {status: 0 for status in STATUSES}
    unrecognized: dict[str, int] = {}

    for record in appointments:
        status = _field(record, 'status')
        when = _local_date(_field(record, 'appointment_date', 'appointmentDate'), reference_now)

        if when is not None and when.year == today.year and when.month <= today.month:
            bucket = monthly[when.month - 1]
            bucket.appointment += 1
            if status == AppointmentStatus.COMPLETED:
                bucket.completed += 1

        if isinstance(status, str) and status in counts:
            counts[status] += 1
        else:
            key = str(status)
            unrecognized[key] = unrecognized.get(key, 0) + 1

    total_unrecognized = sum(unrecognized.values())
    if total_unrecognized:
        logger.warning(
            'appointment_status_unrecognized',
            count=total_unrecognized,
            statuses=sorted(unrecognized),
        )
    return AppointmentStats(status_counts=counts, monthly=monthly, unrecognized=total_unrecognized)
