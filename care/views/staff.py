from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from care.permissions import IsAdminRole
from care.serializers.staff import StaffCreateSerializer
from care.services import staff as svc
from care.services.audit import log_action
from care.views.common import list_params, paged_response


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def list_staff(request):
    params = list_params(request)
    page, data = svc.list_staff(page=params['page'], limit=params['limit'], search=params['search'])
    return paged_response(page, data)


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def create_staff(request):
    s = StaffCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    member = svc.create_staff(s.validated_data)
    log_action(user=request.user, action='staff_create', object_type='staff', object_id=member.id)
    return Response({'ok': True, 'msg': 'Staff added successfully', 'data': svc.format_staff(member)}, status=201)
