"""
Appointment endpoints.

Patients only ever see and book their own appointments and may only
cancel them; clinical users work with every appointment.  Booking,
status changes and billing push a refresh event to open dashboards.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from care.models import Role
from care.permissions import IsClinicalRole
from care.serializers.appointment import AppointmentCreateSerializer, AppointmentStatusSerializer, VitalSignsSerializer
from care.services import appointments as svc
from care.services.audit import log_action
from care.services.broadcast import notify_dashboard_refresh
from care.services.doctors import doctor_for_user
from care.views.common import ensure_patient_access, list_params, own_patient_profile, paged_response


def _is_patient(request) -> bool:
    return getattr(request.user, 'role', None) == Role.PATIENT


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def list_appointments(request):
    """Query params: page, limit, search (patient/doctor name), id (patient or doctor id)."""
    params = list_params(request)
    if _is_patient(request):
        params['id'] = own_patient_profile(request).id
    page, data = svc.list_appointments(**params)
    return paged_response(page, data)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def create_appointment(request):
    s = AppointmentCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    data = dict(s.validated_data)
    if _is_patient(request):
        data['patient_id'] = own_patient_profile(request).id
    elif not data.get('patient_id'):
        raise ValidationError({'patient_id': ['This field is required.']})
    appointment = svc.create_appointment(data)
    log_action(user=request.user, action='appointment_create', object_type='appointment', object_id=appointment.id)
    notify_dashboard_refresh('appointment_created')
    return Response({'ok': True, 'msg': 'Appointment booked successfully', 'data': svc.format_appointment(appointment)}, status=201)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def update_appointment_status(request):
    s = AppointmentStatusSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    appointment = svc.get_appointment(vd['id'])
    svc.update_status(appointment, vd['status'], vd.get('reason', ''), request.user)
    log_action(user=request.user, action='appointment_status', object_type='appointment', object_id=appointment.id,
               detail={'status': appointment.status})
    notify_dashboard_refresh('appointment_status')
    return Response({'ok': True, 'msg': f"Appointment {appointment.status.lower()} successfully"})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def appointment_detail(request, pk: int):
    appointment = svc.get_appointment(pk)
    ensure_patient_access(request, appointment.patient_id)
    return Response({'ok': True, 'data': svc.format_appointment(appointment)})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def appointment_with_records(request, pk: int):
    appointment = svc.get_appointment(pk)
    ensure_patient_access(request, appointment.patient_id)
    return Response({'ok': True, 'data': svc.get_appointment_with_records(pk)})


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsClinicalRole])
def add_vital_signs(request, pk: int):
    s = VitalSignsSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    appointment = svc.get_appointment(pk)
    vitals = svc.add_vital_signs(appointment, s.validated_data, doctor_for_user(request.user))
    log_action(user=request.user, action='vitals_create', object_type='appointment', object_id=appointment.id)
    return Response({'ok': True, 'msg': 'Vital signs added successfully', 'data': svc.format_vital_signs(vitals)}, status=201)
