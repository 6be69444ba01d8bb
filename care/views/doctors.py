from __future__ import annotations

from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from care.permissions import IsAdminRole
from care.serializers.doctor import DoctorCreateSerializer
from care.services import doctors as svc
from care.services.audit import log_action
from care.services.schedule import AVAILABLE_TODAY_LIMIT, available_doctors
from care.views.common import list_params, paged_response


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def list_doctors(request):
    """Paginated doctors.

    Query params:
      - page, limit: pagination
      - search: name, specialization or email contains
    """
    params = list_params(request)
    page, data = svc.list_doctors(page=params['page'], limit=params['limit'], search=params['search'])
    return paged_response(page, data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def all_doctors(request):
    return Response({'ok': True, 'data': svc.all_doctors()})


@api_view(['GET'])
@permission_classes([AllowAny])
def available_today(request):
    data = available_doctors(timezone.now(), AVAILABLE_TODAY_LIMIT, only_available=True)
    return Response({'ok': True, 'data': data})


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def create_doctor(request):
    s = DoctorCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    data = dict(s.validated_data)
    work_schedule = data.pop('work_schedule', [])
    doctor = svc.create_doctor(data, work_schedule)
    log_action(user=request.user, action='doctor_create', object_type='doctor', object_id=doctor.id,
               detail={'workingDays': len(work_schedule)})
    return Response({'ok': True, 'msg': 'Doctor added successfully', 'data': svc.format_doctor(doctor)}, status=201)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def doctor_detail(request, pk: str):
    return Response({'ok': True, **svc.get_doctor(pk)})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def doctor_ratings(request, pk: str):
    return Response({'ok': True, **svc.doctor_ratings(pk)})
