"""JSON logs on stdout for the share link lambdas

Each lambda package calls `initialize_logging()` from its `__init__.py`, so the
root logger is configured before the handler module logs anything. The level
comes from `LOG_LEVEL` (default INFO).

A record logged as

    logger.info('Share link created.', extra={'event': SHARE_CREATED, 'token': fingerprint})

is emitted as one line:

    {"timestamp": "2026-10-16T12:00:00.000Z", "level": "INFO",
     "logger": "sharelinks.services.share_service", "message": "Share link created.",
     "event": "SHARE_CREATED", "token": "3f1c0e9a2b7d"}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from sharelinks.utils.constants import LOG_LEVEL_ENV
from sharelinks.utils.helpers import isoformat_utc


# Attributes every LogRecord has; anything else on a record came from `extra`
_RECORD_ATTRS = frozenset(vars(logging.LogRecord('', logging.NOTSET, '', 0, '', (), None))) | {'message', 'asctime'}


class JsonFormatter(logging.Formatter):
    """Render a LogRecord and its `extra` fields as a JSON object"""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            'timestamp': isoformat_utc(datetime.fromtimestamp(record.created, tz=UTC)),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        log.update((key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRS and key not in log)

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)
        if record.stack_info:
            log['stack'] = self.formatStack(record.stack_info)

        # sets, datetimes, exceptions in `extra`
        return json.dumps(log, default=str)


def initialize_logging() -> None:
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
            'root': {
                'level': os.getenv(LOG_LEVEL_ENV, 'INFO').upper(),
                'handlers': ['stdout'],
            },
        }
    )
