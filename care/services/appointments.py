"""Appointment listing, booking, status changes and vital signs."""
from __future__ import annotations

from typing import Optional

from django.db import transaction
from django.db.models import Q
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from care.models import Appointment, AppointmentStatus, Doctor, MedicalRecord, Patient, Role, Service, VitalSigns
from care.services.billing import format_payment
from care.services.medical import format_medical_record
from care.services.pagination import Page, paginate, search_filter
from care.services.patients import format_patient

APPOINTMENT_SEARCH_FIELDS = ('patient__first_name', 'patient__last_name', 'doctor__name')


def format_appointment(a: Appointment) -> dict:
    return {
        'id': a.id,
        'patientId': a.patient_id,
        'doctorId': a.doctor_id,
        'serviceId': a.service_id,
        'appointmentDate': a.appointment_date.isoformat(),
        'time': a.time,
        'status': a.status,
        'type': a.type,
        'note': a.note,
        'reason': a.reason,
        'patient': {
            'id': a.patient.id,
            'firstName': a.patient.first_name,
            'lastName': a.patient.last_name,
            'phone': a.patient.phone,
            'gender': a.patient.gender,
            'dateOfBirth': a.patient.date_of_birth.isoformat() if a.patient.date_of_birth else None,
            'img': a.patient.img,
            'colorCode': a.patient.color_code,
        },
        'doctor': {
            'id': a.doctor.id,
            'name': a.doctor.name,
            'specialization': a.doctor.specialization,
            'img': a.doctor.img,
            'colorCode': a.doctor.color_code,
        },
    }


def list_appointments(*, page=1, limit=None, search: Optional[str]=None, id: Optional[str]=None) -> tuple[Page, list[dict]]:
    """Appointments newest first.

    ``search`` matches patient or doctor names; ``id`` keeps appointments
    where either the patient or the doctor has that id.  Both apply together.
    """
    cond = search_filter(search, APPOINTMENT_SEARCH_FIELDS)
    if id:
        cond &= Q(patient_id=id) | Q(doctor_id=id)
    qs = (
        Appointment.objects.filter(cond)
        .select_related('patient', 'doctor')
        .order_by('-appointment_date', '-id')
    )
    result = paginate(qs, page, limit)
    return result, [format_appointment(a) for a in result.rows]


def get_appointment(appointment_id) -> Appointment:
    appointment = Appointment.objects.select_related('patient', 'doctor').filter(id=appointment_id).first()
    if not appointment:
        raise NotFound('Appointment not found')
    return appointment


def format_vital_signs(v: VitalSigns) -> dict:
    return {
        'id': v.id,
        'patientId': v.patient_id,
        'medicalId': v.medical_record_id,
        'bodyTemperature': v.body_temperature,
        'systolic': v.systolic,
        'diastolic': v.diastolic,
        'heartRate': v.heart_rate,
        'respiratoryRate': v.respiratory_rate,
        'oxygenSaturation': v.oxygen_saturation,
        'weight': v.weight,
        'height': v.height,
        'createdAt': v.created_at.isoformat(),
    }


def get_appointment_with_records(appointment_id) -> dict:
    appointment = get_appointment(appointment_id)
    records = (
        appointment.medical_records
        .prefetch_related('diagnoses__doctor', 'lab_tests__service', 'vital_signs')
        .order_by('-created_at')
    )
    bills = appointment.bills.prefetch_related('items__service').order_by('-created_at')
    return {
        **format_appointment(appointment),
        'patient': format_patient(appointment.patient),
        'bills': [format_payment(b, with_items=True) for b in bills],
        'medical': [
            {**format_medical_record(r), 'vitalSigns': [format_vital_signs(v) for v in r.vital_signs.all()]}
            for r in records
        ],
    }


def create_appointment(data: dict) -> Appointment:
    patient = Patient.objects.filter(id=data['patient_id']).first()
    doctor = Doctor.objects.filter(id=data['doctor_id']).first()
    if not patient:
        raise ValidationError({'patient_id': ['unknown patient']})
    if not doctor:
        raise ValidationError({'doctor_id': ['unknown doctor']})
    service = None
    if data.get('service_id'):
        service = Service.objects.filter(id=data['service_id']).first()
        if not service:
            raise ValidationError({'service_id': ['unknown service']})
    return Appointment.objects.create(
        patient=patient,
        doctor=doctor,
        service=service,
        appointment_date=data['appointment_date'],
        time=data['time'],
        type=data['type'],
        note=data.get('note') or '',
        status=AppointmentStatus.PENDING,
    )


def update_status(appointment: Appointment, status: str, reason: str, actor) -> Appointment:
    if getattr(actor, 'role', None) == Role.PATIENT:
        own = getattr(appointment.patient, 'user_id', None) == actor.id
        if not own or status != AppointmentStatus.CANCELLED:
            raise PermissionDenied('patients may only cancel their own appointments')
    appointment.status = status
    appointment.reason = reason or ''
    appointment.save(update_fields=['status', 'reason', 'updated_at'])
    return appointment


def add_vital_signs(appointment: Appointment, data: dict, doctor: Optional[Doctor]) -> VitalSigns:
    data = dict(data)
    patient_id = data.pop('patient_id')
    medical_id = data.pop('medical_id', None)
    if patient_id != appointment.patient_id:
        raise ValidationError({'patient_id': ['does not match the appointment']})
    with transaction.atomic():
        if medical_id:
            record = MedicalRecord.objects.filter(id=medical_id, appointment=appointment).first()
            if not record:
                raise NotFound('Medical record not found')
        else:
            record = MedicalRecord.objects.create(
                patient_id=patient_id, appointment=appointment, doctor=doctor or appointment.doctor,
            )
        return VitalSigns.objects.create(patient_id=patient_id, medical_record=record, **data)
