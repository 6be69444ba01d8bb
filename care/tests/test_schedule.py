import datetime as dt

import pytest

from care.models import Weekday
from care.services.schedule import available_doctors, forget_available_doctors, weekday_for

pytestmark = pytest.mark.django_db

MONDAY = dt.date(2024, 3, 11)


def test_weekday_for_uses_monday_as_first_day():
    assert weekday_for(MONDAY) == Weekday.MONDAY
    assert weekday_for(MONDAY + dt.timedelta(days=6)) == Weekday.SUNDAY
    assert weekday_for(dt.datetime(2024, 3, 13, 10, 0)) == Weekday.WEDNESDAY


def test_only_doctors_working_that_day_are_returned(make_doctor):
    on_monday = make_doctor(days=['monday', 'thursday'], name='Alice')
    make_doctor(days=['tuesday'], name='Bob')
    # stored with different case by an import
    mixed_case = make_doctor(days=['Monday'], name='Carol')

    data = available_doctors(MONDAY, 5)
    assert [d['id'] for d in data] == [on_monday.id, mixed_case.id]
    assert {wd['day'] for wd in data[0]['workingDays']} == {'monday', 'thursday'}


def test_limit_and_availability_filter(make_doctor):
    for name in ('A', 'B', 'C', 'D'):
        make_doctor(days=['monday'], name=name)
    make_doctor(days=['monday'], name='Away', availability_status='on leave')

    assert len(available_doctors(MONDAY, 3)) == 3
    names = [d['name'] for d in available_doctors(MONDAY, 10, only_available=True)]
    assert 'Away' not in names
    assert len(names) == 4


def test_results_are_cached_until_forgotten(make_doctor):
    make_doctor(days=['monday'], name='First')
    assert len(available_doctors(MONDAY, 5)) == 1

    make_doctor(days=['monday'], name='Second')
    assert len(available_doctors(MONDAY, 5)) == 1

    forget_available_doctors()
    assert len(available_doctors(MONDAY, 5)) == 2
