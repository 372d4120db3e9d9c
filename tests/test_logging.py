import json
import logging

from hotel import create_app
from hotel.logging import HotelJsonFormatter


def hotel_handler_formatter():
    handler, = logging.getLogger("hotel").handlers
    return handler.formatter


def test_json_log_format(tmp_path):
    create_app("hotel.config.TestingConfig", {
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'log.db'}",
        "LOG_FORMAT": "json",
    })

    formatter = hotel_handler_formatter()
    assert isinstance(formatter, HotelJsonFormatter)

    record = logging.LogRecord("hotel.ledger", logging.INFO, __file__, 1, "Booking %s cancelled", (7,), None)
    payload = json.loads(formatter.format(record))
    assert payload["message"] == "Booking 7 cancelled"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "hotel.ledger"


def test_text_log_format_by_default(app):
    assert not isinstance(hotel_handler_formatter(), HotelJsonFormatter)
