import json

import pytest
import structlog
from django.conf import settings

from care.logging import bind_request_id, clear_request_context, configure_logging


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    clear_request_context()
    configure_logging(json_output=settings.LOG_JSON, level=settings.LOG_LEVEL)


def test_debug_level_lets_debug_events_through(capsys):
    configure_logging(json_output=True, level='DEBUG')
    structlog.get_logger('care.test').debug('debug_event', answer=42)
    line = capsys.readouterr().out.strip().splitlines()[-1]
    event = json.loads(line)
    assert event['event'] == 'debug_event'
    assert event['level'] == 'debug'
    assert event['answer'] == 42


def test_warning_level_filters_info(capsys):
    configure_logging(json_output=True, level='warning')
    structlog.get_logger('care.test').info('quiet_event')
    assert 'quiet_event' not in capsys.readouterr().out


def test_request_id_is_bound_to_events(capsys):
    configure_logging(json_output=True, level='INFO')
    rid = bind_request_id('req-123')
    structlog.get_logger('care.test').info('with_context')
    event = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert rid == 'req-123'
    assert event['request_id'] == 'req-123'
