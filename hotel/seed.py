import logging
from datetime import date, timedelta
from decimal import Decimal

import click
from flask import current_app
from flask.cli import with_appcontext

from hotel import db
from hotel.auth import hash_password
from hotel.ledger import create_booking
from hotel.models import Booking, Role, Room, User

logger = logging.getLogger(__name__)

SAMPLE_ROOMS = [
    ('101', 'Standard', Decimal('100.00')),
    ('102', 'Standard', Decimal('100.00')),
    ('201', 'Deluxe', Decimal('150.00')),
    ('202', 'Deluxe', Decimal('150.00')),
    ('301', 'Suite', Decimal('250.00')),
]

SAMPLE_CUSTOMER_EMAIL = 'customer@hotel.com'


def _ensure_user(name, email, password, role):
    user = User.query.filter_by(email=email).first()
    if user is None:
        user = User(name=name, email=email, password=hash_password(password), role=role)
        db.session.add(user)
        db.session.commit()
        logger.info('Created %s account %s', role.value, email)
    return user


def seed_database():
    """Create the admin account, sample rooms and a sample booking if missing."""
    _ensure_user('Admin User', current_app.config['ADMIN_EMAIL'],
                 current_app.config['ADMIN_PASSWORD'], Role.ADMIN)

    if Room.query.count() == 0:
        db.session.add_all([
            Room(number=number, type=room_type, price=price, available=True)
            for number, room_type, price in SAMPLE_ROOMS
        ])
        db.session.commit()
        logger.info('Created %d sample rooms', len(SAMPLE_ROOMS))

    if Booking.query.count() == 0:
        customer = _ensure_user('Sample Customer', SAMPLE_CUSTOMER_EMAIL,
                                current_app.config['SAMPLE_CUSTOMER_PASSWORD'], Role.CUSTOMER)
        room = Room.query.filter_by(number='101', available=True).first()
        if room is not None:
            today = date.today()
            create_booking(customer.id, room.id, today + timedelta(days=1), today + timedelta(days=3))
            logger.info('Created sample booking for %s', SAMPLE_CUSTOMER_EMAIL)


@click.command('seed')
@with_appcontext
def seed_command():
    """Create the admin account and sample data."""
    seed_database()
    click.echo('Database seeded.')
