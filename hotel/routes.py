import datetime
from decimal import Decimal, InvalidOperation

from flask import Blueprint, jsonify, request

from hotel import auth, chatbot, inventory, ledger
from hotel.errors import ValidationError
from hotel.models import MAX_ID, Role, User, is_valid_id

api = Blueprint('api', __name__)

# Room.price is Numeric(10, 2)
MAX_PRICE = Decimal('99999999.99')


def get_json_body(*required):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')

    missing = [field for field in required if data.get(field) in (None, '')]
    if missing:
        raise ValidationError(f'Missing required fields: {", ".join(missing)}')
    return data


def parse_date(data, field):
    value = data[field]
    if not isinstance(value, str):
        raise ValidationError(f'{field} must be an ISO date string')
    try:
        return datetime.datetime.fromisoformat(value.replace('Z', '')).date()
    except ValueError:
        raise ValidationError(f'{field} must be an ISO date string')


def parse_price(value):
    try:
        price = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError('price must be a decimal number')
    if not price.is_finite() or price < 0 or price > MAX_PRICE:
        raise ValidationError(f'price must be between 0 and {MAX_PRICE}')
    return price.quantize(Decimal('0.01'))


def parse_int(data, field):
    value = data[field]
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValidationError(f'{field} must be an integer')
    try:
        value = int(value)
    except ValueError:
        raise ValidationError(f'{field} must be an integer')
    if not is_valid_id(value):
        raise ValidationError(f'{field} must be a positive integer no larger than {MAX_ID}')
    return value


# max_length mirrors the String(n) column the value is stored in
def parse_text(data, field, max_length):
    value = str(data[field]).strip()
    if not value:
        raise ValidationError(f'Missing required fields: {field}')
    if len(value) > max_length:
        raise ValidationError(f'{field} must be at most {max_length} characters')
    return value


### AUTH ROUTES ###

@api.route('/api/auth/signup', methods=['POST'])
def sign_up():
    data = get_json_body('name', 'email', 'password')
    user = auth.sign_up(
        parse_text(data, 'name', 100),
        parse_text(data, 'email', 100),
        str(data['password']),
    )
    return jsonify({'message': 'User registered successfully', 'user': user.to_dict()}), 201


@api.route('/api/auth/signin', methods=['POST'])
def sign_in():
    data = get_json_body('email', 'password')
    access_token, user = auth.sign_in(str(data['email']), str(data['password']))
    return jsonify({
        'access_token': access_token,
        'token_type': 'Bearer',
        'role': user.role.value,
    }), 200


@api.route('/api/auth/me', methods=['GET'])
def current_user():
    principal = auth.bearer_principal()
    return jsonify({
        'id': principal.user_id,
        'email': principal.email,
        'role': principal.role.value,
    }), 200


@api.route('/api/users', methods=['GET'])
def get_users():
    auth.bearer_principal(Role.ADMIN)
    users = User.query.order_by(User.id).all()
    return jsonify([user.to_dict() for user in users]), 200


### ROOM ROUTES ###

@api.route('/api/rooms', methods=['GET'])
def get_rooms():
    return jsonify([room.to_dict() for room in inventory.list_rooms()]), 200


@api.route('/api/rooms/available', methods=['GET'])
def get_available_rooms():
    return jsonify([room.to_dict() for room in inventory.list_available_rooms()]), 200


@api.route('/api/rooms/<int:room_id>', methods=['GET'])
def get_room(room_id):
    return jsonify(inventory.get_room(room_id).to_dict()), 200


@api.route('/api/rooms', methods=['POST'])
def create_room():
    auth.bearer_principal(Role.ADMIN)
    data = get_json_body('number', 'type', 'price')
    room = inventory.add_room(parse_text(data, 'number', 10), parse_text(data, 'type', 50),
                              parse_price(data['price']))
    return jsonify(room.to_dict()), 201


@api.route('/api/rooms/<int:room_id>', methods=['PUT'])
def update_room(room_id):
    auth.bearer_principal(Role.ADMIN)
    data = get_json_body('number', 'type', 'price')

    available = data.get('available')
    if available is not None and not isinstance(available, bool):
        raise ValidationError('available must be true or false')

    room = inventory.update_room(
        room_id,
        number=parse_text(data, 'number', 10),
        type=parse_text(data, 'type', 50),
        price=parse_price(data['price']),
        available=available,
    )
    return jsonify(room.to_dict()), 200


@api.route('/api/rooms/<int:room_id>', methods=['DELETE'])
def delete_room(room_id):
    auth.bearer_principal(Role.ADMIN)
    inventory.delete_room(room_id)
    return jsonify({'message': 'Room deleted successfully'}), 200


### BOOKING ROUTES ###

@api.route('/api/bookings', methods=['POST'])
def create_booking():
    principal = auth.bearer_principal()
    data = get_json_body('room_id', 'check_in_date', 'check_out_date')

    booking = ledger.create_booking(
        principal.user_id,
        parse_int(data, 'room_id'),
        parse_date(data, 'check_in_date'),
        parse_date(data, 'check_out_date'),
    )
    return jsonify(booking.to_dict()), 201


@api.route('/api/bookings/my-bookings', methods=['GET'])
def get_my_bookings():
    principal = auth.bearer_principal()
    bookings = ledger.bookings_for_user(principal.user_id)
    return jsonify([booking.to_dict() for booking in bookings]), 200


@api.route('/api/bookings', methods=['GET'])
def get_bookings():
    auth.bearer_principal(Role.ADMIN)
    return jsonify([booking.to_dict() for booking in ledger.all_bookings()]), 200


@api.route('/api/bookings/<int:booking_id>', methods=['DELETE'])
def cancel_booking(booking_id):
    principal = auth.bearer_principal()
    ledger.cancel_booking(booking_id, principal=principal)
    return jsonify({'message': 'Booking canceled successfully'}), 200


### CHATBOT ###

@api.route('/api/chatbot', methods=['POST'])
def chat():
    data = get_json_body('message')
    return jsonify({'response': chatbot.reply(str(data['message']))}), 200
