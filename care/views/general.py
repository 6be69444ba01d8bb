from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import PermissionDenied, ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from care.models import Role
from care.permissions import IsAdminRole
from care.serializers.general import DeleteRecordSerializer, RatingSerializer
from care.services import records
from care.services.audit import log_action
from care.views.common import own_patient_profile


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def delete_record(request):
    s = DeleteRecordSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    kind, record_id = s.validated_data['deleteType'], s.validated_data['id']
    records.delete_record(kind, record_id)
    log_action(user=request.user, action=f'{kind}_delete', object_type=kind, object_id=record_id)
    return Response({'ok': True, 'msg': 'Data deleted successfully'})


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def create_rating(request):
    s = RatingSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    data = dict(s.validated_data)
    role = getattr(request.user, 'role', None)
    if role == Role.PATIENT:
        data['patient_id'] = own_patient_profile(request).id
    elif role != Role.ADMIN:
        raise PermissionDenied('only patients rate doctors')
    elif not data.get('patient_id'):
        raise ValidationError({'patient_id': ['This field is required.']})
    rating = records.create_rating(data)
    log_action(user=request.user, action='rating_create', object_type='doctor', object_id=rating.doctor_id)
    return Response({'ok': True, 'msg': 'You rated successfully', 'data': {'id': rating.id}}, status=201)
