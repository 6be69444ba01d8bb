"""
Role dashboards.

Each assembler reads the appointments visible to the role, folds them with
:func:`care.services.stats.summarize` and merges the result with counts
fetched independently.  Database errors are left to the API exception
handler.
"""
from __future__ import annotations

from datetime import datetime

from django.conf import settings

from care.models import Appointment, AppointmentStatus, Doctor, Patient, Role, Staff
from care.services.appointments import format_appointment
from care.services.schedule import available_doctors
from care.services.stats import AppointmentSummary, summarize


def _recent_limit() -> int:
    return getattr(settings, 'DASHBOARD_RECENT_LIMIT', 5)


def _summaries(qs, *, default_status=None) -> list[AppointmentSummary]:
    return [
        AppointmentSummary(appointment_date=row['appointment_date'], status=row['status'] or default_status)
        for row in qs.values('appointment_date', 'status')
    ]


def _recent(qs) -> list[dict]:
    rows = qs.select_related('patient', 'doctor').order_by('-appointment_date', '-id')[:_recent_limit()]
    return [format_appointment(a) for a in rows]


def admin_dashboard(reference_now: datetime) -> dict:
    appointments = Appointment.objects.all()
    summaries = _summaries(appointments)
    stats = summarize(summaries, reference_now)
    return {
        'totalPatient': Patient.objects.count(),
        'totalDoctors': Doctor.objects.count(),
        **stats.as_payload(),
        'availableDoctors': available_doctors(reference_now, getattr(settings, 'DASHBOARD_DOCTOR_LIMIT', 5)),
        'last5Records': _recent(appointments),
        'totalAppointments': len(summaries),
    }


def doctor_dashboard(doctor: Doctor, reference_now: datetime) -> dict:
    """Dashboard of one doctor, limited to appointments up to ``reference_now``."""
    appointments = Appointment.objects.filter(doctor=doctor, appointment_date__lte=reference_now)
    summaries = _summaries(appointments, default_status=AppointmentStatus.PENDING)
    stats = summarize(summaries, reference_now)
    return {
        'totalPatient': Patient.objects.count(),
        'totalNurses': Staff.objects.filter(role=Role.STAFF).count(),
        **stats.as_payload(),
        'last5Records': _recent(appointments),
        'availableDoctors': available_doctors(reference_now, getattr(settings, 'DASHBOARD_DOCTOR_LIMIT', 5)),
        'totalAppointment': len(summaries),
    }


def patient_dashboard(patient: Patient, reference_now: datetime) -> dict:
    appointments = Appointment.objects.filter(patient=patient)
    summaries = _summaries(appointments)
    stats = summarize(summaries, reference_now)
    return {
        'data': {
            'id': patient.id,
            'firstName': patient.first_name,
            'lastName': patient.last_name,
            'gender': patient.gender,
            'img': patient.img,
            'colorCode': patient.color_code,
        },
        **stats.as_payload(),
        'last5Records': _recent(appointments),
        'totalAppointments': len(summaries),
        'availableDoctor': available_doctors(reference_now, getattr(settings, 'PATIENT_DASHBOARD_DOCTOR_LIMIT', 4)),
    }
