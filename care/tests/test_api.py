"""
Integration tests for the clinic API.

These exercise the role dashboards, the paginated list endpoints and the
role based access rules using REST framework's APIClient.
"""
import datetime as dt

import pytest
from django.utils import timezone

from care.models import Appointment, AppointmentStatus, Role, Staff
from care.services.schedule import weekday_for

pytestmark = pytest.mark.django_db


def _today_weekday():
    return weekday_for(timezone.now()).value


@pytest.fixture
def clinic(make_user, make_patient, make_doctor):
    admin = make_user(Role.ADMIN)
    doctor_user = make_user(Role.DOCTOR)
    doctor = make_doctor(days=[_today_weekday()], user=doctor_user, name='Dr Adams')
    other_doctor = make_doctor(days=[], name='Dr Brown')
    patient_user = make_user(Role.PATIENT)
    patient = make_patient(user=patient_user, first_name='Mary', last_name='Major')
    other_patient = make_patient(first_name='Tom', last_name='Thumb')
    now = timezone.now()
    past = now - dt.timedelta(hours=1)
    Appointment.objects.create(patient=patient, doctor=doctor, appointment_date=past, time='09:00',
                               type='checkup', status=AppointmentStatus.COMPLETED)
    Appointment.objects.create(patient=patient, doctor=other_doctor, appointment_date=past, time='10:00',
                               type='checkup', status=AppointmentStatus.PENDING)
    Appointment.objects.create(patient=other_patient, doctor=doctor, appointment_date=past, time='11:00',
                               type='checkup', status=AppointmentStatus.CANCELLED)
    # in the future: visible to the admin, not on the doctor's dashboard
    Appointment.objects.create(patient=other_patient, doctor=doctor, appointment_date=now + dt.timedelta(days=400),
                               time='11:00', type='checkup', status=AppointmentStatus.SCHEDULED)
    return {
        'admin': admin, 'doctor_user': doctor_user, 'doctor': doctor, 'other_doctor': other_doctor,
        'patient_user': patient_user, 'patient': patient, 'other_patient': other_patient,
    }


def test_requires_authentication(api_client):
    r = api_client.get('/api/admin/dashboard')
    assert r.status_code in (401, 403)
    assert r.data['ok'] is False


def test_admin_dashboard(client_for, clinic):
    r = client_for(clinic['admin']).get('/api/admin/dashboard')
    assert r.status_code == 200
    body = r.data
    assert body['ok'] is True
    assert body['totalPatient'] == 2
    assert body['totalDoctors'] == 2
    assert body['totalAppointments'] == 4
    assert body['appointmentCounts'] == {'SCHEDULED': 1, 'PENDING': 1, 'COMPLETED': 1, 'CANCELLED': 1}
    assert len(body['monthlyData']) == timezone.localtime().month
    assert [d['name'] for d in body['availableDoctors']] == ['Dr Adams']
    assert len(body['last5Records']) == 4


def test_admin_dashboard_forbidden_for_patient(client_for, clinic):
    r = client_for(clinic['patient_user']).get('/api/admin/dashboard')
    assert r.status_code == 403
    assert r.data['error']['code'] == 'permission_denied'


def test_doctor_dashboard_only_counts_own_past_appointments(client_for, clinic):
    Staff.objects.create(name='Nurse Joy', email='joy@clinic.test', phone='0700000000', address='Ward 1', role=Role.STAFF)
    r = client_for(clinic['doctor_user']).get('/api/doctor/dashboard')
    assert r.status_code == 200
    assert r.data['totalAppointment'] == 2
    assert r.data['totalNurses'] == 1
    assert r.data['appointmentCounts']['COMPLETED'] == 1
    assert r.data['appointmentCounts']['CANCELLED'] == 1
    assert r.data['appointmentCounts']['SCHEDULED'] == 0


def test_patient_dashboard(client_for, clinic):
    r = client_for(clinic['patient_user']).get('/api/patient/dashboard')
    assert r.status_code == 200
    assert r.data['data']['firstName'] == 'Mary'
    assert r.data['totalAppointments'] == 2
    assert {a['patientId'] for a in r.data['last5Records']} == {clinic['patient'].id}
    assert len(r.data['availableDoctor']) == 1


def test_patient_list_search_and_pagination(client_for, clinic):
    client = client_for(clinic['admin'])
    r = client.get('/api/patients', {'search': 'thumb'})
    assert r.status_code == 200
    assert r.data['totalRecords'] == 1
    assert r.data['data'][0]['firstName'] == 'Tom'

    r = client.get('/api/patients', {'page': 2, 'limit': 1})
    assert r.data['totalPages'] == 2
    assert r.data['currentPage'] == 2
    assert [p['firstName'] for p in r.data['data']] == ['Tom']


def test_patient_list_is_clinical_only(client_for, clinic):
    assert client_for(clinic['patient_user']).get('/api/patients').status_code == 403


def test_appointments_filtered_by_person_id(client_for, clinic):
    client = client_for(clinic['admin'])
    r = client.get('/api/appointments', {'id': clinic['other_doctor'].id})
    assert r.data['totalRecords'] == 1
    r = client.get('/api/appointments', {'id': clinic['doctor'].id, 'search': 'tom'})
    assert r.data['totalRecords'] == 2
    dates = [a['appointmentDate'] for a in r.data['data']]
    assert dates == sorted(dates, reverse=True)


def test_patient_only_sees_own_appointments(client_for, clinic):
    r = client_for(clinic['patient_user']).get('/api/appointments', {'id': clinic['other_patient'].id})
    assert r.data['totalRecords'] == 2
    assert {a['patientId'] for a in r.data['data']} == {clinic['patient'].id}


def test_patient_cannot_read_another_patient(client_for, clinic):
    client = client_for(clinic['patient_user'])
    assert client.get(f"/api/patients/{clinic['other_patient'].id}").status_code == 403
    assert client.get(f"/api/patients/{clinic['patient'].id}").status_code == 200


def test_patient_full_data_by_email(client_for, clinic):
    r = client_for(clinic['admin']).get(f"/api/patients/{clinic['patient'].email}/full")
    assert r.status_code == 200
    assert r.data['data']['totalAppointments'] == 2
    assert r.data['data']['lastVisit'] is not None


def test_register_own_patient_profile(client_for, make_user):
    user = make_user(Role.PATIENT)
    payload = {
        'firstName': 'Grace', 'lastName': 'Hopper', 'dateOfBirth': '1985-12-09', 'gender': 'FEMALE',
        'phone': '0722000000', 'email': 'grace@clinic.test', 'address': '5 Navy Lane',
        'emergencyContactName': 'Bob Hopper', 'privacyConsent': True,
    }
    r = client_for(user).post('/api/patients/register', payload, format='json')
    assert r.status_code == 201
    assert r.data['data']['userId'] == user.id
    assert 'initialPassword' not in r.data


def test_register_rejects_refused_consent(client_for, make_user):
    r = client_for(make_user(Role.ADMIN)).post('/api/patients/register', {
        'firstName': 'Al', 'lastName': 'Bo', 'dateOfBirth': '1985-12-09', 'gender': 'MALE',
        'phone': '0722000000', 'email': 'al@clinic.test', 'address': '5 Navy Lane',
        'emergencyContactName': 'Cy', 'medicalConsent': False,
    }, format='json')
    assert r.status_code == 400
    assert 'medicalConsent' in r.data['error']['message']


def test_create_doctor_with_schedule(client_for, make_user):
    admin = make_user(Role.ADMIN)
    r = client_for(admin).post('/api/doctors/create', {
        'name': 'Dr House', 'phone': '0733000000', 'email': 'house@clinic.test', 'address': 'Princeton',
        'specialization': 'Diagnostics', 'license_number': 'MD-1', 'department': 'Internal',
        'password': 'secret1', 'work_schedule': [
            {'day': 'Monday', 'start_time': '08:00', 'close_time': '12:00'},
            {'day': 'friday', 'start_time': '13:00', 'close_time': '17:00'},
        ],
    }, format='json')
    assert r.status_code == 201
    assert sorted(d['day'] for d in r.data['data']['workingDays']) == ['friday', 'monday']

    from care.models import User
    user = User.objects.get(username='house@clinic.test')
    assert user.role == Role.DOCTOR
    assert user.check_password('secret1')


def test_doctor_create_is_admin_only(client_for, make_user):
    r = client_for(make_user(Role.STAFF)).post('/api/doctors/create', {}, format='json')
    assert r.status_code == 403


def test_doctor_detail_and_ratings(client_for, clinic):
    from care.models import Rating
    Rating.objects.create(patient=clinic['patient'], doctor=clinic['doctor'], rating=5, comment='great')
    Rating.objects.create(patient=clinic['other_patient'], doctor=clinic['doctor'], rating=4, comment='good')
    Rating.objects.create(patient=clinic['other_patient'], doctor=clinic['doctor'], rating=4, comment='fine')
    client = client_for(clinic['admin'])

    r = client.get(f"/api/doctors/{clinic['doctor'].id}")
    assert r.status_code == 200
    assert r.data['totalAppointment'] == 3

    r = client.get(f"/api/doctors/{clinic['doctor'].id}/ratings")
    assert r.data['totalRatings'] == 3
    assert r.data['averageRating'] == '4.3'


def test_available_today_is_public(api_client, clinic):
    r = api_client.get('/api/doctors/available')
    assert r.status_code == 200
    assert [d['name'] for d in r.data['data']] == ['Dr Adams']


def test_staff_and_services(client_for, make_user):
    client = client_for(make_user(Role.ADMIN))
    r = client.post('/api/staff/create', {
        'name': 'Nurse Ratched', 'phone': '0744000000', 'email': 'ratched@clinic.test',
        'address': 'Oregon State', 'role': 'staff', 'password': 'secret1',
    }, format='json')
    assert r.status_code == 201
    assert r.data['data']['status'] == 'ACTIVE'
    assert r.data['data']['colorCode'].startswith('#')
    assert client.get('/api/staff', {'search': 'ratched'}).data['totalRecords'] == 1

    client.post('/api/services/create', {'service_name': 'X-Ray', 'price': '80.00'}, format='json')
    client.post('/api/services/create', {'service_name': 'Blood test', 'price': '20.00', 'category': 'LAB_TEST'}, format='json')
    names = [s['serviceName'] for s in client.get('/api/services').data['data']]
    assert names == ['Blood test', 'X-Ray']


def test_patient_books_and_cancels_own_appointment(client_for, clinic):
    client = client_for(clinic['patient_user'])
    r = client.post('/api/appointments/create', {
        'doctor_id': clinic['doctor'].id, 'patient_id': clinic['other_patient'].id,
        'appointment_date': '2030-01-10T09:00:00Z', 'time': '09:00', 'type': 'consultation',
    }, format='json')
    assert r.status_code == 201
    assert r.data['data']['patientId'] == clinic['patient'].id
    assert r.data['data']['status'] == 'PENDING'
    appointment_id = r.data['data']['id']

    r = client.post('/api/appointments/update-status', {'id': appointment_id, 'status': 'COMPLETED'}, format='json')
    assert r.status_code == 403

    r = client.post('/api/appointments/update-status', {'id': appointment_id, 'status': 'CANCELLED', 'reason': 'travel'}, format='json')
    assert r.status_code == 200
    assert Appointment.objects.get(id=appointment_id).status == AppointmentStatus.CANCELLED


def test_patient_cannot_touch_foreign_appointment(client_for, clinic):
    foreign = Appointment.objects.filter(patient=clinic['other_patient']).first()
    client = client_for(clinic['patient_user'])
    r = client.post('/api/appointments/update-status', {'id': foreign.id, 'status': 'CANCELLED'}, format='json')
    assert r.status_code == 403
    assert client.get(f'/api/appointments/{foreign.id}').status_code == 403


def test_delete_doctor_removes_login(client_for, clinic):
    from care.models import Doctor, User
    doctor_user_id = clinic['doctor_user'].id
    r = client_for(clinic['admin']).post('/api/records/delete', {'id': clinic['doctor'].id, 'deleteType': 'doctor'}, format='json')
    assert r.status_code == 200
    assert not Doctor.objects.filter(id=clinic['doctor'].id).exists()
    assert not User.objects.filter(id=doctor_user_id).exists()


def test_patient_rates_doctor(client_for, clinic):
    client = client_for(clinic['patient_user'])
    r = client.post('/api/ratings/create', {'staff_id': clinic['doctor'].id, 'rating': 6, 'comment': 'x'}, format='json')
    assert r.status_code == 400
    r = client.post('/api/ratings/create', {'staff_id': clinic['doctor'].id, 'rating': 5, 'comment': 'Kind and clear'}, format='json')
    assert r.status_code == 201
    assert clinic['doctor'].ratings.get().patient_id == clinic['patient'].id


def test_healthz(api_client):
    r = api_client.get('/healthz')
    assert r.status_code == 200
    assert r.json()['ok'] is True


def test_request_id_is_echoed(client_for, clinic):
    r = client_for(clinic['admin']).get('/api/services', HTTP_X_REQUEST_ID='abc-123')
    assert r['X-Request-ID'] == 'abc-123'
