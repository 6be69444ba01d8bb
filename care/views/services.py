from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from care.permissions import IsAdminRole
from care.serializers.general import ServiceSerializer
from care.services import catalog
from care.services.audit import log_action


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def list_services(request):
    return Response({'ok': True, 'data': catalog.list_services()})


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def create_service(request):
    s = ServiceSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    service = catalog.create_service(s.validated_data)
    log_action(user=request.user, action='service_create', object_type='service', object_id=service.id)
    return Response({'ok': True, 'msg': 'Service added successfully', 'data': catalog.format_service(service)}, status=201)
