import datetime as dt
import random

from care.services.stats import AppointmentSummary, summarize


def _monthly(stats):
    return [(b.name, b.appointment, b.completed) for b in stats.monthly]


def test_empty_input_gives_zeroed_counts_and_buckets_up_to_reference_month():
    stats = summarize([], dt.date(2024, 3, 15))
    assert stats.status_counts == {'SCHEDULED': 0, 'PENDING': 0, 'COMPLETED': 0, 'CANCELLED': 0}
    assert _monthly(stats) == [('Jan', 0, 0), ('Feb', 0, 0), ('Mar', 0, 0)]
    assert stats.unrecognized == 0


def test_concrete_scenario():
    records = [
        {'appointmentDate': dt.date(2024, 1, 5), 'status': 'COMPLETED'},
        {'appointmentDate': dt.date(2024, 1, 20), 'status': 'CANCELLED'},
        {'appointmentDate': dt.date(2024, 3, 1), 'status': 'COMPLETED'},
        {'appointmentDate': dt.date(2023, 12, 25), 'status': 'PENDING'},
    ]
    stats = summarize(records, dt.date(2024, 3, 10))
    assert stats.status_counts == {'COMPLETED': 2, 'CANCELLED': 1, 'PENDING': 1, 'SCHEDULED': 0}
    assert _monthly(stats) == [('Jan', 2, 1), ('Feb', 0, 0), ('Mar', 1, 1)]


def test_prior_year_and_future_month_count_in_status_only():
    records = [
        AppointmentSummary(dt.date(2023, 2, 1), 'SCHEDULED'),
        AppointmentSummary(dt.date(2024, 4, 2), 'SCHEDULED'),
        AppointmentSummary(dt.date(2024, 12, 31), 'COMPLETED'),
    ]
    stats = summarize(records, dt.date(2024, 3, 31))
    assert stats.status_counts['SCHEDULED'] == 2
    assert stats.status_counts['COMPLETED'] == 1
    assert all(b.appointment == 0 for b in stats.monthly)


def test_last_day_of_reference_month_is_inside_window():
    stats = summarize([AppointmentSummary(dt.date(2024, 3, 31), 'PENDING')], dt.date(2024, 3, 1))
    assert _monthly(stats)[-1] == ('Mar', 1, 0)


def test_status_totals_do_not_depend_on_order():
    base = [
        AppointmentSummary(dt.date(2024, m, 1), s)
        for m, s in [(1, 'PENDING'), (2, 'COMPLETED'), (2, 'CANCELLED'), (3, 'COMPLETED'), (5, 'SCHEDULED')]
    ]
    shuffled = list(base)
    random.Random(7).shuffle(shuffled)
    ref = dt.date(2024, 6, 1)
    assert summarize(base, ref).status_counts == summarize(shuffled, ref).status_counts
    assert sum(summarize(base, ref).status_counts.values()) == len(base)


def test_completed_never_exceeds_appointments_per_month():
    records = [AppointmentSummary(dt.date(2024, 1 + i % 6, 3), s)
               for i, s in enumerate(['COMPLETED', 'PENDING', 'COMPLETED', 'CANCELLED'] * 5)]
    stats = summarize(records, dt.date(2024, 6, 30))
    assert all(b.completed <= b.appointment for b in stats.monthly)


def test_same_input_gives_same_output():
    records = [{'appointment_date': '2024-02-10T09:30:00', 'status': 'COMPLETED'}]
    first = summarize(records, dt.date(2024, 2, 11)).as_payload()
    second = summarize(records, dt.date(2024, 2, 11)).as_payload()
    assert first == second


def test_unknown_status_is_reported_and_kept_out_of_status_counts():
    records = [
        {'appointmentDate': dt.date(2024, 1, 4), 'status': 'NO_SHOW'},
        {'appointmentDate': dt.date(2024, 1, 5), 'status': 'PENDING'},
    ]
    stats = summarize(records, dt.date(2024, 1, 31))
    assert stats.unrecognized == 1
    assert sum(stats.status_counts.values()) == 1
    # still occupies its month
    assert _monthly(stats) == [('Jan', 2, 0)]


def test_malformed_or_missing_date_only_skips_monthly():
    records = [
        {'appointmentDate': 'not-a-date', 'status': 'COMPLETED'},
        {'appointmentDate': '2024-13-45', 'status': 'COMPLETED'},
        {'status': 'CANCELLED'},
    ]
    stats = summarize(records, dt.date(2024, 2, 1))
    assert stats.status_counts['COMPLETED'] == 2
    assert stats.status_counts['CANCELLED'] == 1
    assert all(b.appointment == 0 for b in stats.monthly)


def test_aware_datetimes_use_reference_timezone():
    plus_two = dt.timezone(dt.timedelta(hours=2))
    # 23:30 UTC on Jan 31 is already Feb 1 at +02:00
    late_january = dt.datetime(2024, 1, 31, 23, 30, tzinfo=dt.timezone.utc)
    stats = summarize([AppointmentSummary(late_january, 'PENDING')], dt.datetime(2024, 2, 5, tzinfo=plus_two))
    assert _monthly(stats) == [('Jan', 0, 0), ('Feb', 1, 0)]


def test_payload_shape():
    payload = summarize([AppointmentSummary(dt.date(2024, 1, 2), 'COMPLETED')], dt.date(2024, 1, 9)).as_payload()
    assert payload == {
        'appointmentCounts': {'SCHEDULED': 0, 'PENDING': 0, 'COMPLETED': 1, 'CANCELLED': 0},
        'monthlyData': [{'name': 'Jan', 'appointment': 1, 'completed': 1}],
    }


def test_non_string_status_counts_as_unrecognized():
    records = [
        {'appointmentDate': dt.date(2024, 1, 2), 'status': ['COMPLETED']},
        {'appointmentDate': dt.date(2024, 1, 3), 'status': {'value': 'PENDING'}},
        {'appointmentDate': dt.date(2024, 1, 4), 'status': None},
    ]
    stats = summarize(records, dt.date(2024, 1, 5))
    assert stats.unrecognized == 3
    assert sum(stats.status_counts.values()) == 0
    assert _monthly(stats) == [('Jan', 3, 0)]
