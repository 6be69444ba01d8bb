"""Medical records, diagnoses and the weekly vital-sign chart."""
from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import Optional

from django.conf import settings
from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound, ValidationError

from care.models import Appointment, Diagnosis, Doctor, MedicalRecord, VitalSigns
from care.services.pagination import Page, paginate, search_filter
from care.services.stats import MONTH_NAMES

MEDICAL_SEARCH_FIELDS = ('patient__first_name', 'patient__last_name', 'patient__id')

_LEADING_INT = re.compile(r'\d+')


def format_diagnosis(d: Diagnosis) -> dict:
    return {
        'id': d.id,
        'symptoms': d.symptoms,
        'diagnosis': d.diagnosis,
        'notes': d.notes,
        'prescribedMedications': d.prescribed_medications,
        'followUpPlan': d.follow_up_plan,
        'createdAt': d.created_at.isoformat(),
        'doctor': {'id': d.doctor.id, 'name': d.doctor.name, 'specialization': d.doctor.specialization},
    }


def format_medical_record(r: MedicalRecord) -> dict:
    return {
        'id': r.id,
        'patientId': r.patient_id,
        'appointmentId': r.appointment_id,
        'doctorId': r.doctor_id,
        'treatmentPlan': r.treatment_plan,
        'prescriptions': r.prescriptions,
        'labRequest': r.lab_request,
        'notes': r.notes,
        'createdAt': r.created_at.isoformat(),
        'diagnoses': [format_diagnosis(d) for d in r.diagnoses.all()],
        'labTests': [
            {'id': t.id, 'serviceName': t.service.service_name, 'testDate': t.test_date.isoformat(),
             'result': t.result, 'status': t.status, 'notes': t.notes}
            for t in r.lab_tests.all()
        ],
    }


def list_medical_records(*, page=1, limit=None, search: Optional[str]=None) -> tuple[Page, list[dict]]:
    qs = (
        MedicalRecord.objects.filter(search_filter(search, MEDICAL_SEARCH_FIELDS))
        .select_related('patient')
        .prefetch_related('diagnoses__doctor', 'lab_tests__service')
        .order_by('-created_at')
    )
    result = paginate(qs, page, limit)
    data = [
        {**format_medical_record(r),
         'patient': {'id': r.patient.id, 'firstName': r.patient.first_name, 'lastName': r.patient.last_name,
                     'img': r.patient.img, 'colorCode': r.patient.color_code}}
        for r in result.rows
    ]
    return result, data


def add_diagnosis(appointment: Appointment, data: dict) -> Diagnosis:
    data = dict(data)
    medical_id = data.pop('medical_id', None)
    patient_id = data.pop('patient_id')
    doctor_id = data.pop('doctor_id')
    if patient_id != appointment.patient_id:
        raise ValidationError({'patient_id': ['does not match the appointment']})
    if not Doctor.objects.filter(id=doctor_id).exists():
        raise ValidationError({'doctor_id': ['unknown doctor']})
    with transaction.atomic():
        if medical_id:
            record = MedicalRecord.objects.filter(id=medical_id, appointment=appointment).first()
            if not record:
                raise NotFound('Medical record not found')
        else:
            record = MedicalRecord.objects.create(
                patient_id=patient_id, doctor_id=doctor_id, appointment=appointment,
            )
        return Diagnosis.objects.create(
            patient_id=patient_id, doctor_id=doctor_id, medical_record=record, **data,
        )


def parse_heart_rate(value: str) -> tuple[int, int]:
    """Split a "low-high" heart rate; unreadable or missing parts are 0."""
    parts = (value or '').split('-')
    numbers = []
    for part in parts[:2]:
        match = _LEADING_INT.match(part.strip())
        numbers.append(int(match.group()) if match else 0)
    while len(numbers) < 2:
        numbers.append(0)
    return numbers[0], numbers[1]


def chart_label(moment: datetime) -> str:
    if timezone.is_aware(moment):
        moment = timezone.localtime(moment)
    return f"{MONTH_NAMES[moment.month - 1]} {moment.day}"


def vital_sign_chart(patient_id: str, reference_now: datetime) -> dict:
    days = getattr(settings, 'VITALS_WINDOW_DAYS', 7)
    local_now = timezone.localtime(reference_now) if timezone.is_aware(reference_now) else reference_now
    since = (local_now - timedelta(days=days)).replace(hour=0, minute=0, second=0, microsecond=0)
    rows = list(
        VitalSigns.objects.filter(patient_id=patient_id, created_at__gte=since)
        .only('created_at', 'systolic', 'diastolic', 'heart_rate')
        .order_by('created_at')
    )
    if not rows:
        return {
            'data': [],
            'average': '0.00/0.00 mg/dL',
            'heartRateData': [],
            'averageHeartRate': '0.00-0.00 bpm',
        }

    pressure = [{'label': chart_label(r.created_at), 'systolic': r.systolic, 'diastolic': r.diastolic} for r in rows]
    heart = []
    for r in rows:
        low, high = parse_heart_rate(r.heart_rate)
        heart.append({'label': chart_label(r.created_at), 'value1': low, 'value2': high})

    count = len(rows)
    avg_sys = sum(r.systolic for r in rows) / count
    avg_dia = sum(r.diastolic for r in rows) / count
    avg_low = sum(h['value1'] for h in heart) / count
    avg_high = sum(h['value2'] for h in heart) / count
    return {
        'data': pressure,
        'average': f"{avg_sys:.2f}/{avg_dia:.2f} mg/dL",
        'heartRateData': heart,
        'averageHeartRate': f"{avg_low:.2f}-{avg_high:.2f} bpm",
    }
