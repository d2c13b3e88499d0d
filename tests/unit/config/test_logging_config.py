# nosec B101


import json
import logging
import sys

from config.logging_config import ComparisonLogFormatter


def make_record(msg='comparing', exc_info=None, **extra):
    record = logging.LogRecord(
        name='application.services.comparison_session',
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_lifts_session_context():
    record = make_record(session_id='abc123', corridor='USD -> INR')

    entry = json.loads(ComparisonLogFormatter().format(record))

    assert entry['message'] == 'comparing'
    assert entry['level'] == 'INFO'
    assert entry['logger'] == 'application.services.comparison_session'
    assert entry['session_id'] == 'abc123'
    assert entry['corridor'] == 'USD -> INR'


def test_formatter_omits_missing_context():
    entry = json.loads(ComparisonLogFormatter().format(make_record()))

    assert 'session_id' not in entry
    assert 'corridor' not in entry


def test_formatter_includes_exception_details():
    try:
        raise RuntimeError('socket closed')
    except RuntimeError:
        exc_info = sys.exc_info()

    entry = json.loads(ComparisonLogFormatter().format(make_record(exc_info=exc_info)))

    assert entry['error'] == {'type': 'RuntimeError', 'detail': 'socket closed'}
    assert 'RuntimeError: socket closed' in entry['traceback']
