import pytest
from django.test import override_settings

from care.models import Patient
from care.services.pagination import page_window, paginate, search_filter


@pytest.mark.parametrize('page,limit,expected', [
    (1, 10, (1, 10, 0)),
    (3, 5, (3, 5, 10)),
    (0, 5, (1, 5, 0)),
    (-2, 5, (1, 5, 0)),
    ('abc', None, (1, 10, 0)),
    (None, '0', (1, 10, 0)),
    ('2', '1000', (2, 100, 100)),
])
def test_page_window(page, limit, expected):
    assert page_window(page, limit) == expected


@override_settings(PAGE_SIZE_DEFAULT=4)
def test_page_window_default_comes_from_settings():
    assert page_window(2, None) == (2, 4, 4)


@pytest.mark.django_db
def test_paginate_counts_filtered_rows(make_patient):
    for i in range(7):
        make_patient(first_name=f'Anna{i}')
    for i in range(3):
        make_patient(first_name=f'Ben{i}')

    qs = Patient.objects.filter(search_filter('anna', ['first_name', 'last_name'])).order_by('first_name')
    page = paginate(qs, 2, 5)
    assert page.total_records == 7
    assert page.total_pages == 2
    assert page.current_page == 2
    assert [p.first_name for p in page.rows] == ['Anna5', 'Anna6']

    payload = page.as_payload(['x'])
    assert payload['totalRecords'] == 7
    assert payload['pagination'] == {'total': 7, 'page': 2, 'pageSize': 5}


@pytest.mark.django_db
def test_empty_search_matches_everything(make_patient):
    make_patient()
    make_patient()
    assert Patient.objects.filter(search_filter('  ', ['first_name'])).count() == 2
    assert paginate(Patient.objects.none(), 1, 10).total_pages == 0
