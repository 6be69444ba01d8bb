"""
Patient endpoints.

Clinical users (admin, doctor, staff) list and look up patients; a patient
registers and updates their own profile and may read only their own data.
"""
from __future__ import annotations

from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from care.models import Role
from care.permissions import IsClinicalRole
from care.serializers.patient import PatientSerializer, PatientUpdateSerializer
from care.services import patients as svc
from care.services.audit import log_action
from care.services.medical import vital_sign_chart
from care.views.common import ensure_patient_access, list_params, paged_response


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsClinicalRole])
def list_patients(request):
    params = list_params(request)
    page, data = svc.list_patients(page=params['page'], limit=params['limit'], search=params['search'])
    return paged_response(page, data)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def register_patient(request):
    s = PatientSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    patient, initial_password = svc.create_patient(request.user, s.validated_data)
    log_action(user=request.user, action='patient_create', object_type='patient', object_id=patient.id)
    payload = {'ok': True, 'msg': 'Patient created successfully', 'data': svc.format_patient(patient)}
    if initial_password:
        payload['initialPassword'] = initial_password
    return Response(payload, status=201)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def update_patient(request):
    s = PatientUpdateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    data = dict(s.validated_data)
    pid = data.pop('pid')
    role = getattr(request.user, 'role', None)
    if role == Role.PATIENT:
        ensure_patient_access(request, pid)
    elif role not in (Role.ADMIN, Role.STAFF):
        raise PermissionDenied('not allowed to update patients')
    patient = svc.update_patient(pid, data)
    log_action(user=request.user, action='patient_update', object_type='patient', object_id=patient.id)
    return Response({'ok': True, 'msg': 'Patient info updated successfully', 'data': svc.format_patient(patient)})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def patient_detail(request, pk: str):
    ensure_patient_access(request, pk)
    return Response({'ok': True, 'data': svc.format_patient(svc.get_patient(pk))})


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsClinicalRole])
def patient_full_data(request, pk: str):
    """Look a patient up by id or email, with visit totals."""
    return Response({'ok': True, 'data': svc.get_patient_full_data(pk)})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def patient_vitals(request, pk: str):
    ensure_patient_access(request, pk)
    svc.get_patient(pk)
    return Response({'ok': True, **vital_sign_chart(pk, timezone.now())})
