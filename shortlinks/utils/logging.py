"""Structured JSON logging for the lambda handlers

`initialize_logging()` runs on import of each lambda package (see
`shortlinks/lambdas/*/__init__.py`), so handler modules only need
`logging.getLogger(__name__)`.

Every record is written to stdout as a single JSON line. Fields passed via
`extra=` are promoted to top-level keys:

    >>> logger.info('Redirecting client to long URL. Responding with 301.',
    ...             extra={'event': 'REDIRECT_SUCCESS', 'shortId': 'abc123'})
    {"timestamp": "2025-12-26T12:00:00.000Z", "level": "INFO",
     "logger": "shortlinks.lambdas.resolve_url.app",
     "message": "Redirecting client to long URL. Responding with 301.",
     "event": "REDIRECT_SUCCESS", "shortId": "abc123"}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from shortlinks.constants import ENV


DEFAULT_LOG_LEVEL = 'INFO'

# Attributes every LogRecord carries; anything else came in through `extra`
_RECORD_ATTRS = frozenset(vars(logging.LogRecord('', logging.NOTSET, '', 0, '', (), None))) | {'message', 'asctime'}


def _utc_timestamp(created: float) -> str:
    return datetime.fromtimestamp(created, tz=UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class JsonFormatter(logging.Formatter):
    """Render a LogRecord (and its `extra` fields) as one JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            'timestamp': _utc_timestamp(record.created),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        log.update((key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRS)

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        # Exceptions and other non-JSON extras are logged by their str()
        return json.dumps(log, default=str)


def _log_level() -> str:
    level = os.getenv(ENV.App.LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
    return level if level in logging.getLevelNamesMapping() else DEFAULT_LOG_LEVEL


def initialize_logging() -> None:
    """Route the root logger to stdout through JsonFormatter at LOG_LEVEL (default INFO)."""
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
                },
            },
            'root': {'level': _log_level(), 'handlers': ['stdout']},
        }
    )
