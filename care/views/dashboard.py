"""
Role dashboard endpoints.

Each returns appointment totals per status, the monthly chart from January
to the current month, the latest appointments and the doctors working
today, scoped to the caller's role.
"""
from __future__ import annotations

from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from care.permissions import IsAdminRole, IsDoctorRole, IsPatientRole
from care.services import dashboard
from care.services.doctors import doctor_for_user
from care.views.common import own_patient_profile


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def admin_dashboard(request):
    return Response({'ok': True, **dashboard.admin_dashboard(timezone.now())})


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsDoctorRole])
def doctor_dashboard(request):
    doctor = doctor_for_user(request.user)
    if doctor is None:
        raise NotFound('Doctor profile not found')
    return Response({'ok': True, **dashboard.doctor_dashboard(doctor, timezone.now())})


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsPatientRole])
def patient_dashboard(request):
    patient = own_patient_profile(request)
    return Response({'ok': True, **dashboard.patient_dashboard(patient, timezone.now())})
