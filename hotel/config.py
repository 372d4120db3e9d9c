import os
from datetime import timedelta


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'change-me-hotel-development-secret-key')

    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///hotel.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    JWT_SECRET_KEY = os.environ.get('JWT_SECRET_KEY', SECRET_KEY)
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=int(os.environ.get('JWT_EXPIRES_HOURS', '6')))

    BCRYPT_ROUNDS = int(os.environ.get('BCRYPT_ROUNDS', '12'))

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FORMAT = os.environ.get('LOG_FORMAT', 'text')  # 'text' or 'json'

    SEED_DATA = _env_flag('SEED_DATA', True)
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL', 'admin@hotel.com')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD', 'password')
    SAMPLE_CUSTOMER_PASSWORD = os.environ.get('SAMPLE_CUSTOMER_PASSWORD', 'customer-password')


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'testing-secret'
    JWT_SECRET_KEY = 'testing-jwt-secret-with-enough-bytes'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    BCRYPT_ROUNDS = 4
    SEED_DATA = False
    LOG_LEVEL = 'WARNING'
