# hotel/models.py
import enum

from hotel import db

# Integer primary keys are signed 64-bit on every supported backend.
MAX_ID = 2 ** 63 - 1


def is_valid_id(value):
    return 0 < value <= MAX_ID


class Role(enum.Enum):
    ADMIN = 'admin'
    CUSTOMER = 'customer'


class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(100), unique=True, nullable=False)
    password = db.Column(db.String(100), nullable=False)  # bcrypt hash
    role = db.Column(db.Enum(Role), nullable=False, default=Role.CUSTOMER)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'role': self.role.value,
        }


class Room(db.Model):
    __tablename__ = 'rooms'

    id = db.Column(db.Integer, primary_key=True)
    number = db.Column(db.String(10), unique=True, nullable=False)
    type = db.Column(db.String(50), nullable=False)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    available = db.Column(db.Boolean, nullable=False, default=True)

    def to_dict(self):
        return {
            'id': self.id,
            'number': self.number,
            'type': self.type,
            'price': str(self.price),
            'available': self.available,
        }


class Booking(db.Model):
    __tablename__ = 'bookings'

    # Plain foreign keys only: a booking refers to its user and room by id.
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    room_id = db.Column(db.Integer, db.ForeignKey('rooms.id'), nullable=False, index=True)
    check_in_date = db.Column(db.Date, nullable=False)
    check_out_date = db.Column(db.Date, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'room_id': self.room_id,
            'check_in_date': self.check_in_date.strftime('%Y-%m-%d'),
            'check_out_date': self.check_out_date.strftime('%Y-%m-%d'),
        }
