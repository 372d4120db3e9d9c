import logging
from collections import namedtuple

import bcrypt
from flask import current_app, request
from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt import ExpiredSignatureError, InvalidTokenError
from sqlalchemy.exc import IntegrityError

from hotel import db
from hotel.errors import (
    EmailAlreadyRegistered,
    Forbidden,
    InvalidCredentials,
    InvalidToken,
    TokenExpired,
    UserNotFound,
    ValidationError,
)
from hotel.models import Role, User

logger = logging.getLogger(__name__)

# Identity and role recovered from a session token.
Principal = namedtuple('Principal', ['user_id', 'email', 'role'])

# bcrypt only looks at the first 72 bytes of a password.
MAX_PASSWORD_BYTES = 72


def normalize_email(email):
    return email.strip().lower()


def hash_password(password):
    password = password.encode('utf-8')
    if len(password) > MAX_PASSWORD_BYTES:
        raise ValidationError(f'Password must be at most {MAX_PASSWORD_BYTES} bytes')
    rounds = current_app.config['BCRYPT_ROUNDS']
    return bcrypt.hashpw(password, bcrypt.gensalt(rounds=rounds)).decode('utf-8')


def check_password(password, hashed):
    password = password.encode('utf-8')
    if len(password) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(password, hashed.encode('utf-8'))


def sign_up(name, email, password):
    """Register a customer account. Self-registration never grants Admin."""
    email = normalize_email(email)
    if User.query.filter_by(email=email).first() is not None:
        raise EmailAlreadyRegistered()

    user = User(name=name, email=email, password=hash_password(password), role=Role.CUSTOMER)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # Lost a race with a concurrent sign-up for the same email.
        db.session.rollback()
        raise EmailAlreadyRegistered()

    logger.info('Registered user %s (id=%s)', user.email, user.id)
    return user


def issue_token(user):
    return create_access_token(
        identity=str(user.id),
        additional_claims={'email': user.email, 'role': user.role.value},
    )


def sign_in(email, password):
    """Check credentials and return ``(access_token, user)``."""
    email = normalize_email(email)
    user = User.query.filter_by(email=email).first()
    if user is None:
        logger.info('Sign-in failed for %s: unknown email', email)
        raise UserNotFound(f'User not found with email: {email}')

    if not check_password(password, user.password):
        logger.info('Sign-in failed for %s: bad password', email)
        raise InvalidCredentials()

    logger.info('User %s signed in', email)
    return issue_token(user), user


def authorize(token, required_role=None):
    """
    Decode a session token into a Principal.

    Checks the signature and expiry only; the database is never consulted.
    Raises TokenExpired, InvalidToken, or Forbidden when ``required_role`` is
    given and the token carries a different role.
    """
    if not token:
        raise InvalidToken()

    try:
        claims = decode_token(token)
    except ExpiredSignatureError:
        raise TokenExpired()
    except (InvalidTokenError, JWTExtendedException):
        raise InvalidToken()

    if claims.get('type') != 'access':
        raise InvalidToken()

    try:
        principal = Principal(
            user_id=int(claims['sub']),
            email=claims['email'],
            role=Role(claims['role']),
        )
    except (KeyError, TypeError, ValueError):
        raise InvalidToken()

    if required_role is not None and principal.role != required_role:
        raise Forbidden()

    return principal


def bearer_token():
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer':
        return None
    return token.strip() or None


def bearer_principal(required_role=None):
    """Authorize the bearer token sent with the current request."""
    return authorize(bearer_token(), required_role=required_role)
