"""Payments and their bill lines."""
from __future__ import annotations

from decimal import Decimal
from typing import Optional

from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from care.models import Appointment, AppointmentStatus, PatientBill, Payment, Role, Service
from care.services.pagination import Page, paginate, search_filter

PAYMENT_SEARCH_FIELDS = ('patient__first_name', 'patient__last_name', 'patient__id')
BILLING_ROLES = {Role.ADMIN, Role.DOCTOR}


def format_bill_item(item: PatientBill) -> dict:
    return {
        'id': item.id,
        'serviceId': item.service_id,
        'serviceName': item.service.service_name,
        'serviceDate': item.service_date.isoformat(),
        'quantity': item.quantity,
        'unitCost': str(item.unit_cost),
        'totalCost': str(item.total_cost),
    }


def format_payment(p: Payment, *, with_items: bool = False) -> dict:
    data = {
        'id': p.id,
        'patientId': p.patient_id,
        'appointmentId': p.appointment_id,
        'billDate': p.bill_date.isoformat(),
        'paymentDate': p.payment_date.isoformat(),
        'discount': str(p.discount),
        'totalAmount': str(p.total_amount),
        'amountPaid': str(p.amount_paid),
        'paymentMethod': p.payment_method,
        'status': p.status,
    }
    if with_items:
        data['items'] = [format_bill_item(i) for i in p.items.all()]
    return data


def list_payments(*, page=1, limit=None, search: Optional[str]=None) -> tuple[Page, list[dict]]:
    qs = (
        Payment.objects.filter(search_filter(search, PAYMENT_SEARCH_FIELDS))
        .select_related('patient')
        .order_by('-created_at')
    )
    result = paginate(qs, page, limit)
    data = [
        {**format_payment(p),
         'patient': {'id': p.patient.id, 'firstName': p.patient.first_name, 'lastName': p.patient.last_name,
                     'img': p.patient.img, 'colorCode': p.patient.color_code}}
        for p in result.rows
    ]
    return result, data


def add_bill(data: dict, actor) -> PatientBill:
    """Append a service line to the appointment's bill.

    Without ``bill_id`` the appointment's first payment is used, or a new
    zero-amount payment is opened for it.
    """
    if getattr(actor, 'role', None) not in BILLING_ROLES:
        raise PermissionDenied('You are not authorized to add a bill')
    service = Service.objects.filter(id=data['service_id']).first()
    if not service:
        raise ValidationError({'service_id': ['unknown service']})
    with transaction.atomic():
        bill_id = data.get('bill_id') or None
        if bill_id is None:
            appointment = Appointment.objects.filter(id=data['appointment_id']).first()
            if not appointment:
                raise NotFound('Appointment not found for billing.')
            payment = appointment.bills.order_by('id').first()
            if payment is None:
                now = timezone.now()
                payment = Payment.objects.create(
                    appointment=appointment,
                    patient_id=appointment.patient_id,
                    bill_date=now,
                    payment_date=now,
                    discount=Decimal('0'),
                    amount_paid=Decimal('0'),
                    total_amount=Decimal('0'),
                )
        else:
            payment = Payment.objects.filter(id=bill_id, appointment_id=data['appointment_id']).first()
            if not payment:
                raise NotFound('Bill not found')
        return PatientBill.objects.create(
            payment=payment,
            service=service,
            service_date=data['service_date'],
            quantity=data['quantity'],
            unit_cost=data['unit_cost'],
            total_cost=data['total_cost'],
        )


def discount_amount(percent: Decimal, total: Decimal) -> Decimal:
    return (Decimal(percent) / Decimal(100) * Decimal(total)).quantize(Decimal('0.01'))


def generate_bill(data: dict) -> Payment:
    with transaction.atomic():
        payment = Payment.objects.select_for_update().filter(id=data['id']).first()
        if not payment:
            raise NotFound('Payment not found')
        payment.bill_date = data['bill_date']
        payment.discount = discount_amount(data['discount'], data['total_amount'])
        payment.total_amount = data['total_amount']
        payment.save(update_fields=['bill_date', 'discount', 'total_amount'])
        Appointment.objects.filter(id=payment.appointment_id).update(status=AppointmentStatus.COMPLETED)
    return payment
