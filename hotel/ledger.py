"""
Booking ledger.

A room is either available or reserved by exactly one booking. Creating a
booking flips the room's ``available`` flag to false and cancelling one flips
it back; each of those runs as a single transaction, so the flag and the
booking rows never disagree.
"""

import logging

from sqlalchemy import delete, select, update

from hotel import db
from hotel.errors import BookingNotFound, Forbidden, InvalidDateRange, RoomUnavailable
from hotel.inventory import get_room
from hotel.models import Booking, Role, Room, is_valid_id

logger = logging.getLogger(__name__)


def create_booking(user_id, room_id, check_in_date, check_out_date):
    if check_in_date >= check_out_date:
        raise InvalidDateRange()

    room = get_room(room_id)
    try:
        # Check-and-flip in one statement: the write lock it takes means only
        # one concurrent caller can see the room as available.
        claimed = db.session.execute(
            update(Room)
            .where(Room.id == room.id, Room.available.is_(True))
            .values(available=False)
            .execution_options(synchronize_session=False)
        ).rowcount
        if claimed != 1:
            raise RoomUnavailable(f'Room {room.number} is not available')

        booking = Booking(
            user_id=user_id,
            room_id=room.id,
            check_in_date=check_in_date,
            check_out_date=check_out_date,
        )
        db.session.add(booking)
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.info('Booking of room %s by user %s rejected', room_id, user_id)
        raise

    logger.info('User %s booked room %s (booking %s)', user_id, room.number, booking.id)
    return booking


def cancel_booking(booking_id, principal=None):
    """
    Delete a booking and make its room available again.

    When ``principal`` is given, customers may only cancel their own bookings;
    admins may cancel any.
    """
    booking = db.session.get(Booking, booking_id) if is_valid_id(booking_id) else None
    if booking is None:
        raise BookingNotFound(f'Booking {booking_id} not found')

    if principal is not None and principal.role != Role.ADMIN \
            and principal.user_id != booking.user_id:
        raise Forbidden('Unauthorized to cancel this booking')

    room_id = booking.room_id
    try:
        deleted = db.session.execute(
            delete(Booking)
            .where(Booking.id == booking_id)
            .execution_options(synchronize_session=False)
        ).rowcount
        if deleted != 1:
            raise BookingNotFound(f'Booking {booking_id} not found')

        db.session.execute(
            update(Room)
            .where(Room.id == room_id)
            .values(available=True)
            .execution_options(synchronize_session=False)
        )
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info('Booking %s cancelled, room %s available again', booking_id, room_id)


def bookings_for_user(user_id):
    return db.session.scalars(
        select(Booking).where(Booking.user_id == user_id).order_by(Booking.id)
    ).all()


def all_bookings():
    return db.session.scalars(select(Booking).order_by(Booking.id)).all()
