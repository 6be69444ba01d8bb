import pytest
from rest_framework.test import APIClient

from care.models import AuditEvent, Role, User

pytestmark = pytest.mark.django_db


def login(client, username, password):
    return client.post('/api/auth/login', {'username': username, 'password': password}, format='json')


def test_no_role_bypass_in_login():
    client = APIClient()
    u = User.objects.create_user(username='u1', password='P@ssw0rd1', role=Role.PATIENT)
    r = client.post('/api/auth/login', {'username': 'u1', 'password': 'P@ssw0rd1', 'role': 'admin'}, format='json')
    assert r.status_code == 200
    assert r.data['role'] == Role.PATIENT
    u.refresh_from_db()
    assert u.role == Role.PATIENT


def test_login_returns_jwt_and_legacy_token():
    client = APIClient()
    User.objects.create_user(username='u_jwt', password='P@ssw0rd1', role=Role.DOCTOR)
    r = login(client, 'u_jwt', 'P@ssw0rd1')
    assert r.status_code == 200
    assert r.data['jwt_access'] and r.data['jwt_refresh'] and r.data['token']

    client.credentials(HTTP_AUTHORIZATION=f"Bearer {r.data['jwt_access']}")
    assert client.get('/api/services').status_code == 200

    client.credentials(HTTP_AUTHORIZATION=f"Token {r.data['token']}")
    assert client.get('/api/services').status_code == 200


def test_failed_login_is_audited_and_rejected():
    client = APIClient()
    User.objects.create_user(username='u2', password='P@ssw0rd1')
    r = login(client, 'u2', 'wrong')
    assert r.status_code == 401
    assert r.data['ok'] is False
    event = AuditEvent.objects.get(action='login')
    assert event.detail['result'] == 'fail'
    assert event.user is None


def test_refresh_and_logout_blacklist():
    client = APIClient()
    User.objects.create_user(username='u3', password='P@ssw0rd1')
    tokens = login(client, 'u3', 'P@ssw0rd1').data

    r = client.post('/api/auth/refresh', {'refresh': tokens['jwt_refresh']}, format='json')
    assert r.status_code == 200
    assert r.data['jwt_access']

    client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['jwt_access']}")
    r = client.post('/api/auth/logout', {'refresh': tokens['jwt_refresh']}, format='json')
    assert r.status_code == 200
    assert r.data['blacklisted'] == 1

    client.credentials()
    r = client.post('/api/auth/refresh', {'refresh': tokens['jwt_refresh']}, format='json')
    assert r.status_code == 401


def test_refresh_rejects_garbage():
    r = APIClient().post('/api/auth/refresh', {'refresh': 'not-a-token'}, format='json')
    assert r.status_code == 401


def test_patient_creation_uses_strong_password():
    client = APIClient()
    User.objects.create_user(username='admin1', password='P@ssw0rd1', role=Role.ADMIN)
    token = login(client, 'admin1', 'P@ssw0rd1').data['token']
    client.credentials(HTTP_AUTHORIZATION=f'Token {token}')
    resp = client.post('/api/patients/register', {
        'firstName': 'Ada', 'lastName': 'Lovelace', 'dateOfBirth': '1990-12-10', 'gender': 'FEMALE',
        'phone': '0755000000', 'email': 'ada@clinic.test', 'address': '12 St James Square',
        'emergencyContactName': 'Byron',
    }, format='json')
    assert resp.status_code == 201
    password = resp.data['initialPassword']
    assert password and password != '0755000000'
    assert len(password) >= 12

    patient_login = login(APIClient(), 'ada@clinic.test', password)
    assert patient_login.status_code == 200
    assert patient_login.data['role'] == Role.PATIENT
    assert patient_login.data['user']['profileId'] == resp.data['data']['id']


def test_doctor_cannot_register_patient():
    client = APIClient()
    doctor = User.objects.create_user(username='doc', password='P@ssw0rd1', role=Role.DOCTOR)
    client.force_authenticate(doctor)
    resp = client.post('/api/patients/register', {
        'firstName': 'Ada', 'lastName': 'Lovelace', 'dateOfBirth': '1990-12-10', 'gender': 'FEMALE',
        'phone': '0755000000', 'email': 'ada2@clinic.test', 'address': '12 St James Square',
        'emergencyContactName': 'Byron',
    }, format='json')
    assert resp.status_code == 403


def test_only_admin_deletes_records(make_user, make_patient):
    patient = make_patient()
    client = APIClient()
    client.force_authenticate(make_user(Role.STAFF))
    r = client.post('/api/records/delete', {'id': patient.id, 'deleteType': 'patient'}, format='json')
    assert r.status_code == 403
