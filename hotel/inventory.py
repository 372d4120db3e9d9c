import logging

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError

from hotel import db
from hotel.errors import RoomNotFound, RoomNumberTaken, RoomUnavailable
from hotel.models import Booking, Room, is_valid_id

logger = logging.getLogger(__name__)


def list_rooms():
    return Room.query.order_by(Room.id).all()


def list_available_rooms():
    return Room.query.filter_by(available=True).order_by(Room.id).all()


def get_room(room_id):
    room = db.session.get(Room, room_id) if is_valid_id(room_id) else None
    if room is None:
        raise RoomNotFound(f'Room with id {room_id} does not exist')
    return room


def room_counts():
    """Return ``(available, total)`` room counts."""
    total = db.session.scalar(select(func.count(Room.id)))
    available = db.session.scalar(select(func.count(Room.id)).where(Room.available.is_(True)))
    return available, total


def has_live_booking(room_id):
    return db.session.scalar(
        select(func.count(Booking.id)).where(Booking.room_id == room_id)
    ) > 0


def _commit_room(room):
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise RoomNumberTaken(f'Room number {room.number} already exists')


def add_room(number, type, price):
    room = Room(number=number, type=type, price=price, available=True)
    db.session.add(room)
    _commit_room(room)
    logger.info('Added room %s (id=%s)', room.number, room.id)
    return room


def update_room(room_id, number, type, price, available=None):
    room = get_room(room_id)

    # The flag belongs to the booking ledger; an edit may only restate it.
    if available is not None and available == has_live_booking(room.id):
        if available:
            raise RoomUnavailable(f'Room {room.number} has an active booking')
        raise RoomUnavailable(f'Room {room.number} has no booking to hold it')

    room.number = number
    room.type = type
    room.price = price
    _commit_room(room)
    logger.info('Updated room %s (id=%s)', room.number, room.id)
    return room


def delete_room(room_id):
    room = get_room(room_id)
    number = room.number
    try:
        # Only an available room can go; a booking that lands first wins.
        deleted = db.session.execute(
            delete(Room)
            .where(Room.id == room.id, Room.available.is_(True))
            .execution_options(synchronize_session=False)
        ).rowcount
        if deleted != 1:
            still_there = db.session.scalar(select(Room.id).where(Room.id == room.id))
            if still_there is None:
                raise RoomNotFound(f'Room with id {room_id} does not exist')
            raise RoomUnavailable(f'Room {number} has an active booking')
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info('Deleted room %s (id=%s)', number, room_id)
