import pytest
from app import create_app
from models import db
from config import TestConfig
from store import RecordStore


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    with app.app_context():
        yield app.test_client()


@pytest.fixture
def store(app):
    return RecordStore()


@pytest.fixture
def sample_records(store):
    """The two-record store used across the export tests."""
    return [
        store.insert(name='Ann', surname='Lee', age=30, phone_number='555-1'),
        store.insert(name='Bo', surname='Kim', age=41, phone_number='555-2'),
    ]
