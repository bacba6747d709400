"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` in the lambda handler's `__init__.py` file
before any other logging is done.

Every record is written to stdout as one JSON object per line, which
CloudWatch Logs Insights can query by field:

{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "edgelinks.registry.link_registry",
    "message": "Allocated short link.",
    "identifier": "my-link",
    "event": "LINK_CREATED"
}

Fields passed through `extra={...}` are copied to the top level of the object.
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from edgelinks.constants import ENV


# Attributes every LogRecord carries; anything else on a record came from `extra`
RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {'message', 'asctime'}


class JsonFormatter(logging.Formatter):
    """Render LogRecords, including their extras, as single-line JSON"""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        log.update({key: value for key, value in record.__dict__.items() if key not in RECORD_ATTRS})

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)
        if record.stack_info:
            log['stack'] = self.formatStack(record.stack_info)

        # Extras are not guaranteed to be JSON-serializable (enums, models, ...)
        return json.dumps(log, default=str)


def initialize_logging(level: str | None = None) -> None:
    """Route all logging to stdout through JsonFormatter.

    Args:
        level (str | None):
            Root log level. Defaults to the LOG_LEVEL environment variable, then INFO.
    """
    level = (level or os.getenv(ENV.App.LOG_LEVEL, 'INFO')).upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {'json': {'()': JsonFormatter}},
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {'level': level, 'handlers': ['stdout']},
        }
    )
