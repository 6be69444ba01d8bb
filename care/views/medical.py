from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from care.permissions import IsClinicalRole
from care.serializers.medical import DiagnosisSerializer
from care.services import medical as svc
from care.services.appointments import get_appointment
from care.services.audit import log_action
from care.views.common import list_params, paged_response


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsClinicalRole])
def list_medical_records(request):
    params = list_params(request)
    page, data = svc.list_medical_records(page=params['page'], limit=params['limit'], search=params['search'])
    return paged_response(page, data)


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsClinicalRole])
def add_diagnosis(request):
    s = DiagnosisSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    data = dict(s.validated_data)
    appointment = get_appointment(data.pop('appointment_id'))
    diagnosis = svc.add_diagnosis(appointment, data)
    log_action(user=request.user, action='diagnosis_create', object_type='appointment', object_id=appointment.id)
    return Response({'ok': True, 'msg': 'Diagnosis added successfully', 'data': {'id': diagnosis.id, 'medicalId': diagnosis.medical_record_id}}, status=201)
