import datetime as dt
from decimal import Decimal

import pytest
from django.utils import timezone

from care.models import Appointment, AppointmentStatus, PatientBill, Payment, Role

pytestmark = pytest.mark.django_db


@pytest.fixture
def appointment(make_patient, make_doctor):
    return Appointment.objects.create(
        patient=make_patient(), doctor=make_doctor(), appointment_date=timezone.now() - dt.timedelta(days=1),
        time='09:00', type='consultation',
    )


def _bill_line(appointment, service, **extra):
    body = {
        'appointment_id': appointment.id, 'service_id': service.id,
        'service_date': '2024-05-01T10:00:00Z', 'quantity': 2, 'unit_cost': '50.00', 'total_cost': '100.00',
    }
    body.update(extra)
    return body


def test_first_line_opens_a_zero_payment(client_for, make_user, appointment, service):
    client = client_for(make_user(Role.DOCTOR))
    r = client.post('/api/payments/bills/add', _bill_line(appointment, service), format='json')
    assert r.status_code == 201
    payment = Payment.objects.get(appointment=appointment)
    assert payment.total_amount == 0
    assert payment.patient_id == appointment.patient_id

    r = client.post('/api/payments/bills/add', _bill_line(appointment, service, quantity=1, total_cost='50.00'), format='json')
    assert r.status_code == 201
    assert Payment.objects.filter(appointment=appointment).count() == 1
    assert PatientBill.objects.filter(payment=payment).count() == 2


def test_staff_cannot_add_bill(client_for, make_user, appointment, service):
    r = client_for(make_user(Role.STAFF)).post('/api/payments/bills/add', _bill_line(appointment, service), format='json')
    assert r.status_code == 403
    assert not Payment.objects.exists()


def test_generate_bill_converts_percent_and_completes_appointment(client_for, make_user, appointment, service):
    client = client_for(make_user(Role.ADMIN))
    bill_id = client.post('/api/payments/bills/add', _bill_line(appointment, service), format='json').data['billId']

    r = client.post('/api/payments/generate', {
        'id': bill_id, 'bill_date': '2024-05-02T12:00:00Z', 'discount': '10', 'total_amount': '250.00',
    }, format='json')
    assert r.status_code == 200
    payment = Payment.objects.get(id=bill_id)
    assert payment.discount == Decimal('25.00')
    assert payment.total_amount == Decimal('250.00')
    appointment.refresh_from_db()
    assert appointment.status == AppointmentStatus.COMPLETED


def test_payments_list_searches_patient_name(client_for, make_user, appointment, service):
    client = client_for(make_user(Role.ADMIN))
    client.post('/api/payments/bills/add', _bill_line(appointment, service), format='json')
    hit = client.get('/api/payments', {'search': appointment.patient.first_name})
    miss = client.get('/api/payments', {'search': 'nobody'})
    assert hit.data['totalRecords'] == 1
    assert miss.data['totalRecords'] == 0


def test_appointment_with_records_includes_bills(client_for, make_user, appointment, service):
    client = client_for(make_user(Role.ADMIN))
    client.post('/api/payments/bills/add', _bill_line(appointment, service), format='json')
    r = client.get(f'/api/appointments/{appointment.id}/medical')
    assert r.status_code == 200
    assert r.data['data']['bills'][0]['items'][0]['serviceName'] == 'Consultation'


def test_payments_list_searches_patient_id(client_for, make_user, appointment, service):
    client = client_for(make_user(Role.ADMIN))
    client.post('/api/payments/bills/add', _bill_line(appointment, service), format='json')
    r = client.get('/api/payments', {'search': appointment.patient_id[:8]})
    assert r.status_code == 200
    assert r.data['totalRecords'] == 1


def test_delete_payment_with_non_numeric_id_is_rejected(client_for, make_user):
    r = client_for(make_user(Role.ADMIN)).post('/api/records/delete', {'id': 'abc', 'deleteType': 'payment'}, format='json')
    assert r.status_code == 400
    assert r.data['ok'] is False


def test_delete_payment_removes_it(client_for, make_user, appointment, service):
    client = client_for(make_user(Role.ADMIN))
    bill_id = client.post('/api/payments/bills/add', _bill_line(appointment, service), format='json').data['billId']
    r = client.post('/api/records/delete', {'id': str(bill_id), 'deleteType': 'payment'}, format='json')
    assert r.status_code == 200
    assert not Payment.objects.filter(id=bill_id).exists()
