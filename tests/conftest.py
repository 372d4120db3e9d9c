# tests/conftest.py
from decimal import Decimal

import pytest

from hotel import create_app, db
from hotel.auth import hash_password, issue_token
from hotel.models import Role, Room, User


@pytest.fixture(scope="function")
def app(tmp_path):
    # temp DB file so worker threads get their own connections
    app = create_app(
        "hotel.config.TestingConfig",
        {"SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'hotel-test.db'}"},
    )
    with app.app_context():
        yield app
        db.session.remove()
        db.engine.dispose()


@pytest.fixture(scope="function")
def client(app):
    return app.test_client()


# Factories
@pytest.fixture
def make_user(app):
    def _make_user(email="guest@example.com", name="Guest", password="secret", role=Role.CUSTOMER):
        u = User(name=name, email=email, password=hash_password(password), role=role)
        db.session.add(u)
        db.session.commit()
        return u
    return _make_user


@pytest.fixture
def make_room(app):
    def _make_room(number="101", type="Standard", price="100.00", available=True):
        r = Room(number=number, type=type, price=Decimal(price), available=available)
        db.session.add(r)
        db.session.commit()
        return r
    return _make_room


@pytest.fixture
def admin(make_user):
    return make_user(email="admin@hotel.com", name="Admin", role=Role.ADMIN)


@pytest.fixture
def customer(make_user):
    return make_user(email="customer@example.com", name="Customer")


@pytest.fixture
def auth_header(app):
    def _auth_header(user):
        return {"Authorization": f"Bearer {issue_token(user)}"}
    return _auth_header
