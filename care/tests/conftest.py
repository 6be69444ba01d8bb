import datetime as dt
import itertools

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from care.models import Doctor, Patient, Role, Service, User, WorkingDay

_seq = itertools.count(1)


@pytest.fixture(autouse=True)
def _clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    def make(role=Role.PATIENT, username=None, password='P@ssw0rd1'):
        n = next(_seq)
        return User.objects.create_user(
            username=username or f'{role}{n}@clinic.test',
            email=username or f'{role}{n}@clinic.test',
            password=password,
            role=role,
        )
    return make


@pytest.fixture
def make_patient(db, make_user):
    def make(user=None, **kwargs):
        n = next(_seq)
        fields = {
            'first_name': f'Pat{n}',
            'last_name': 'Doe',
            'email': f'patient{n}@clinic.test',
            'phone': '0712345678',
            'date_of_birth': dt.date(1990, 5, 17),
            'gender': 'FEMALE',
            'address': '12 Harbour Road',
            'emergency_contact_name': 'Jane Doe',
        }
        fields.update(kwargs)
        return Patient.objects.create(user=user, **fields)
    return make


@pytest.fixture
def make_doctor(db, make_user):
    def make(days=(), user=None, **kwargs):
        n = next(_seq)
        fields = {
            'name': f'Dr Who {n}',
            'email': f'doctor{n}@clinic.test',
            'specialization': 'Cardiology',
            'license_number': f'LIC-{n}',
            'phone': '0711111111',
            'address': '1 Clinic Way',
        }
        fields.update(kwargs)
        doctor = Doctor.objects.create(user=user, **fields)
        for day in days:
            WorkingDay.objects.create(doctor=doctor, day=day, start_time='08:00', close_time='17:00')
        return doctor
    return make


@pytest.fixture
def service(db):
    return Service.objects.create(service_name='Consultation', price='50.00')


@pytest.fixture
def client_for(api_client):
    def login_as(user):
        api_client.force_authenticate(user=user)
        return api_client
    return login_as
