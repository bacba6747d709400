"""Unit tests for JSON logging in logging.py"""

import json
import logging

from freezegun import freeze_time

from edgelinks.utils.logging import JsonFormatter, initialize_logging


def make_record(msg='Allocated short link.', exc_info=None, **extra):
    record = logging.LogRecord(
        name='edgelinks.registry.link_registry',
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=None,
        exc_info=exc_info,
    )
    record.__dict__.update(extra)
    return record


@freeze_time('2025-12-26 12:00:00')
def test_json_formatter():
    log = json.loads(JsonFormatter().format(make_record(identifier='my-link', event='LINK_CREATED')))

    assert log == {
        'timestamp': '2025-12-26T12:00:00.000Z',
        'level': 'INFO',
        'logger': 'edgelinks.registry.link_registry',
        'message': 'Allocated short link.',
        'identifier': 'my-link',
        'event': 'LINK_CREATED',
    }


def test_json_formatter_with_exception():
    try:
        raise RuntimeError('boom')
    except RuntimeError as e:
        record = make_record(msg='Failed.', exc_info=(type(e), e, e.__traceback__))

    log = json.loads(JsonFormatter().format(record))

    assert log['message'] == 'Failed.'
    assert 'RuntimeError: boom' in log['exception']


def test_json_formatter_serializes_unknown_types():
    log = json.loads(JsonFormatter().format(make_record(kind=object())))
    assert log['kind'].startswith('<object object at')


def test_initialize_logging(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'debug')

    initialize_logging()

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_json_formatter_with_stack_info():
    record = make_record()
    record.stack_info = 'Stack (most recent call last):\n  File "app.py", line 1'

    log = json.loads(JsonFormatter().format(record))

    assert log['stack'].startswith('Stack (most recent call last)')


def test_initialize_logging_with_explicit_level(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'debug')

    initialize_logging('warning')

    assert logging.getLogger().level == logging.WARNING
