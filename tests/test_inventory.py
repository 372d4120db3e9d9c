from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from hotel import db, inventory, ledger
from hotel.errors import RoomNotFound, RoomUnavailable
from hotel.models import MAX_ID, Booking, Room


def run_in_other_worker(app, action):
    def work():
        with app.app_context():
            try:
                action()
            finally:
                db.session.remove()

    with ThreadPoolExecutor(max_workers=1) as executor:
        executor.submit(work).result()


def interleave_after_lookup(monkeypatch, app, action):
    """Run ``action`` in another worker right after delete_room loads the room."""
    lookup = inventory.get_room

    def get_room_then_act(room_id):
        room = lookup(room_id)
        run_in_other_worker(app, action)
        return room

    monkeypatch.setattr(inventory, "get_room", get_room_then_act)


def test_delete_available_room(make_room):
    room_id = make_room().id

    inventory.delete_room(room_id)

    assert db.session.scalar(db.select(Room.id).where(Room.id == room_id)) is None


def test_delete_reserved_room(customer, make_room):
    room_id = make_room().id
    ledger.create_booking(customer.id, room_id, date(2024, 1, 1), date(2024, 1, 3))

    with pytest.raises(RoomUnavailable):
        inventory.delete_room(room_id)

    assert Booking.query.filter_by(room_id=room_id).count() == 1


def test_booking_that_lands_before_delete_keeps_room(app, customer, make_room, monkeypatch):
    room_id = make_room().id
    customer_id = customer.id
    interleave_after_lookup(monkeypatch, app, lambda: ledger.create_booking(
        customer_id, room_id, date(2024, 1, 1), date(2024, 1, 3)))

    with pytest.raises(RoomUnavailable):
        inventory.delete_room(room_id)

    db.session.expire_all()
    room = db.session.get(Room, room_id)
    assert room is not None
    assert room.available is False
    assert Booking.query.filter_by(room_id=room_id).count() == 1


def test_room_removed_before_delete(app, make_room, monkeypatch):
    room_id = make_room().id

    def remove_room():
        db.session.execute(db.delete(Room).where(Room.id == room_id))
        db.session.commit()

    interleave_after_lookup(monkeypatch, app, remove_room)

    with pytest.raises(RoomNotFound):
        inventory.delete_room(room_id)


@pytest.mark.parametrize("room_id", [0, -1, MAX_ID + 1, 10 ** 30])
def test_get_room_out_of_range_id(app, room_id):
    with pytest.raises(RoomNotFound):
        inventory.get_room(room_id)
