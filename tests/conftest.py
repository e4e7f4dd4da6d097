from datetime import date, timedelta
from decimal import Decimal

import pytest
from flask_jwt_extended import create_access_token

from app import create_app
from app.extensions import db
from app.models import Event, User
from app.models.enums import UserType


@pytest.fixture
def app(tmp_path):
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'youth_events.db'}",
            "JWT_SECRET_KEY": "test-secret-key-that-is-long-enough-for-hs256",
            "RATELIMIT_ENABLED": False,
            "LOG_LEVEL": "WARNING",
        }
    )
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(app):
    def _headers(identity):
        token = create_access_token(identity=identity)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def make_user(app):
    def _make(external_id, user_type=UserType.USER, email=None):
        user = User(external_id=external_id, user_type=user_type, email=email)
        db.session.add(user)
        db.session.commit()
        return user

    return _make


@pytest.fixture
def make_event(app):
    def _make(name="Spring Baseball Clinic", capacity=None, days_from_today=14, price="0"):
        event = Event(
            name=name,
            date=date.today() + timedelta(days=days_from_today),
            description="Hitting and fielding drills",
            location="Riverside Park, Field 2",
            capacity=capacity,
            age_group="8-12",
            price=Decimal(price),
        )
        db.session.add(event)
        db.session.commit()
        return event

    return _make


@pytest.fixture
def parent(make_user):
    return make_user("parent-uid")


@pytest.fixture
def admin(make_user):
    return make_user("admin-uid", user_type=UserType.ADMIN)
