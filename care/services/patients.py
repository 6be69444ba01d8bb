"""Patient profiles and patient registration."""
from __future__ import annotations

import secrets
from typing import Optional

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Count, Max, Q
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from care.models import MedicalRecord, Patient, Role
from care.services.colors import color_for
from care.services.pagination import Page, paginate, search_filter

User = get_user_model()

PATIENT_SEARCH_FIELDS = ('first_name', 'last_name', 'phone', 'email')


def format_patient(p: Patient) -> dict:
    return {
        'id': p.id,
        'userId': p.user_id,
        'firstName': p.first_name,
        'lastName': p.last_name,
        'email': p.email,
        'phone': p.phone,
        'dateOfBirth': p.date_of_birth.isoformat() if p.date_of_birth else None,
        'gender': p.gender,
        'maritalStatus': p.marital_status,
        'nutritionalStatus': p.nutritional_status,
        'address': p.address,
        'emergencyContactName': p.emergency_contact_name,
        'emergencyContactNumber': p.emergency_contact_number,
        'relation': p.relation,
        'bloodGroup': p.blood_group,
        'allergies': p.allergies,
        'medicalConditions': p.medical_conditions,
        'medicalHistory': p.medical_history,
        'insuranceProvider': p.insurance_provider,
        'insuranceNumber': p.insurance_number,
        'privacyConsent': p.privacy_consent,
        'serviceConsent': p.service_consent,
        'medicalConsent': p.medical_consent,
        'img': p.img,
        'colorCode': p.color_code,
        'createdAt': p.created_at.isoformat() if p.created_at else None,
        'updatedAt': p.updated_at.isoformat() if p.updated_at else None,
    }


def _latest_treatment(p: Patient) -> Optional[dict]:
    """Latest medical record of the patient's most recent appointment."""
    appointment = p.appointments.order_by('-appointment_date').first()
    if not appointment:
        return None
    record = MedicalRecord.objects.filter(appointment=appointment).order_by('-created_at').first()
    if not record:
        return None
    return {'createdAt': record.created_at.isoformat(), 'treatmentPlan': record.treatment_plan}


def list_patients(*, page=1, limit=None, search: Optional[str]=None) -> tuple[Page, list[dict]]:
    qs = Patient.objects.filter(search_filter(search, PATIENT_SEARCH_FIELDS)).order_by('first_name', 'last_name')
    result = paginate(qs, page, limit)
    data = [{**format_patient(p), 'lastTreatment': _latest_treatment(p)} for p in result.rows]
    return result, data


def get_patient(patient_id: str) -> Patient:
    patient = Patient.objects.filter(id=patient_id).first()
    if not patient:
        raise NotFound('Patient data not found')
    return patient


def get_patient_full_data(id_or_email: str) -> dict:
    patient = (
        Patient.objects.filter(Q(id=id_or_email) | Q(email=id_or_email))
        .annotate(total_appointments=Count('appointments'), last_visit=Max('appointments__appointment_date'))
        .first()
    )
    if not patient:
        raise NotFound('Patient data not found.')
    return {
        **format_patient(patient),
        'totalAppointments': patient.total_appointments,
        'lastVisit': patient.last_visit.isoformat() if patient.last_visit else None,
    }


def patient_for_user(user) -> Optional[Patient]:
    return Patient.objects.filter(user=user).first() if user else None


def create_patient(current_user, data: dict) -> tuple[Patient, Optional[str]]:
    """Create a patient profile.

    A patient registering themselves gets the profile linked to their own
    login.  Administrators and staff registering someone else create a new
    patient login with a random password, returned once so it can be
    handed over.
    """
    role = getattr(current_user, 'role', '')
    initial_password = None
    if Patient.objects.filter(email=data['email']).exists():
        raise ValidationError({'email': ['a patient with this email already exists']})
    with transaction.atomic():
        if role == Role.PATIENT:
            if Patient.objects.filter(user=current_user).exists():
                raise ValidationError({'detail': 'patient profile already exists'})
            user = current_user
            user.first_name = data['first_name']
            user.last_name = data['last_name']
            user.save(update_fields=['first_name', 'last_name'])
        elif role in (Role.ADMIN, Role.STAFF):
            if User.objects.filter(username=data['email']).exists():
                raise ValidationError({'email': ['an account with this email already exists']})
            initial_password = secrets.token_urlsafe(12)
            user = User.objects.create_user(
                username=data['email'],
                email=data['email'],
                password=initial_password,
                first_name=data['first_name'],
                last_name=data['last_name'],
                role=Role.PATIENT,
            )
        else:
            raise PermissionDenied('not allowed to register patients')
        patient = Patient.objects.create(user=user, color_code=color_for(data['email']), **data)
    return patient, initial_password


def update_patient(patient_id: str, data: dict) -> Patient:
    patient = get_patient(patient_id)
    email = data.get('email')
    if email and Patient.objects.filter(email=email).exclude(id=patient.id).exists():
        raise ValidationError({'email': ['an account with this email already exists']})
    with transaction.atomic():
        for field, value in data.items():
            setattr(patient, field, value)
        patient.save()
        if patient.user_id:
            user = patient.user
            user.first_name = patient.first_name
            user.last_name = patient.last_name
            user.save(update_fields=['first_name', 'last_name'])
    return patient
