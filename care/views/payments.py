from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from care.permissions import IsClinicalRole
from care.serializers.billing import AddBillSerializer, GenerateBillSerializer
from care.services import billing as svc
from care.services.audit import log_action
from care.services.broadcast import notify_dashboard_refresh
from care.views.common import list_params, paged_response


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsClinicalRole])
def list_payments(request):
    params = list_params(request)
    page, data = svc.list_payments(page=params['page'], limit=params['limit'], search=params['search'])
    return paged_response(page, data)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def add_bill(request):
    s = AddBillSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    item = svc.add_bill(s.validated_data, request.user)
    log_action(user=request.user, action='bill_add', object_type='payment', object_id=item.payment_id)
    return Response({'ok': True, 'msg': 'Bill added successfully', 'data': svc.format_bill_item(item), 'billId': item.payment_id}, status=201)


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsClinicalRole])
def generate_bill(request):
    s = GenerateBillSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    payment = svc.generate_bill(s.validated_data)
    log_action(user=request.user, action='bill_generate', object_type='payment', object_id=payment.id,
               detail={'discount': str(payment.discount)})
    notify_dashboard_refresh('bill_generated')
    return Response({'ok': True, 'msg': 'Bill generated successfully', 'data': svc.format_payment(payment)})
