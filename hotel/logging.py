"""
Logging setup for the hotel service.

Plain text output by default; set LOG_FORMAT=json to get one JSON object per
line through python-json-logger.
"""

import logging.config

from pythonjsonlogger.json import JsonFormatter


class HotelJsonFormatter(JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['level'] = record.levelname
        log_record['logger'] = record.name


def configure_logging(app):
    formatter = 'json' if app.config.get('LOG_FORMAT') == 'json' else 'standard'
    level = app.config.get('LOG_LEVEL', 'INFO')

    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            },
            'json': {
                '()': HotelJsonFormatter,
                'format': '%(asctime)s %(levelname)s %(name)s %(message)s',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': formatter,
            },
        },
        'loggers': {
            'hotel': {
                'handlers': ['console'],
                'level': level,
                'propagate': False,
            },
        },
    })
