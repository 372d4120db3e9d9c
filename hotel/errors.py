"""
Error types raised by the hotel services.

Every error carries a readable message and the HTTP status it maps to; the
handler registered by ``register_error_handlers`` renders them as
``{"error": message}``.
"""

import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class HotelError(Exception):
    status_code = 400
    message = 'Request could not be processed'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


### Bad input ###

class ValidationError(HotelError):
    status_code = 400
    message = 'Invalid request data'


class InvalidDateRange(HotelError):
    status_code = 400
    message = 'Check-out date must be after check-in date'


### Authentication ###

class UserNotFound(HotelError):
    status_code = 401
    message = 'User not found'


class InvalidCredentials(HotelError):
    status_code = 401
    message = 'Invalid email or password'


class InvalidToken(HotelError):
    status_code = 401
    message = 'Invalid or missing access token'


class TokenExpired(HotelError):
    status_code = 401
    message = 'Access token has expired'


class Forbidden(HotelError):
    status_code = 403
    message = 'You are not allowed to perform this action'


### Not found ###

class RoomNotFound(HotelError):
    status_code = 404
    message = 'Room not found'


class BookingNotFound(HotelError):
    status_code = 404
    message = 'Booking not found'


### Conflicts ###

class EmailAlreadyRegistered(HotelError):
    status_code = 409
    message = 'Email address already in use'


class RoomNumberTaken(HotelError):
    status_code = 409
    message = 'Room number already exists'


class RoomUnavailable(HotelError):
    status_code = 409
    message = 'Room not available'


def register_error_handlers(app):
    @app.errorhandler(HotelError)
    def handle_hotel_error(error):
        logger.info('%s: %s', type(error).__name__, error.message)
        return jsonify({'error': error.message}), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'error': error.description}), error.code
