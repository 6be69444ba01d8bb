"""Record deletion and doctor ratings."""
from __future__ import annotations

from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from care.models import Doctor, Patient, Payment, Rating, Staff
from care.services.schedule import forget_available_doctors

PROFILE_MODELS = {
    'doctor': Doctor,
    'staff': Staff,
    'patient': Patient,
}


def delete_record(kind: str, record_id) -> None:
    """Delete a doctor, staff member, patient or payment.

    Profiles take their login user with them.
    """
    if kind == 'payment':
        try:
            payment_id = int(record_id)
        except (TypeError, ValueError):
            raise ValidationError({'id': ['payment ids are numeric']})
        deleted, _ = Payment.objects.filter(id=payment_id).delete()
        if not deleted:
            raise NotFound('Record not found')
        return
    model = PROFILE_MODELS.get(kind)
    if model is None:
        raise ValidationError({'deleteType': ['unknown record type']})
    with transaction.atomic():
        profile = model.objects.select_related('user').filter(id=record_id).first()
        if not profile:
            raise NotFound('Record not found')
        user = profile.user
        profile.delete()
        if user is not None:
            user.delete()
    if kind == 'doctor':
        forget_available_doctors()


def create_rating(data: dict) -> Rating:
    patient = Patient.objects.filter(id=data['patient_id']).first()
    if not patient:
        raise ValidationError({'patient_id': ['unknown patient']})
    doctor = Doctor.objects.filter(id=data['staff_id']).first()
    if not doctor:
        raise ValidationError({'staff_id': ['unknown doctor']})
    return Rating.objects.create(patient=patient, doctor=doctor, rating=data['rating'], comment=data['comment'])
