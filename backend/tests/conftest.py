"""
Pytest fixtures for the voicepos backend tests.

Provides the application (in-memory store), a test client and fixtures that
reset the store to a known state before each test.
"""

import pytest

from voicepos import create_app
from voicepos.extensions import db
from voicepos.services.store_service import reset_store


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'SEED_DEMO_DATA': False,
    })

    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def store(app):
    """Store loaded with the demo records (5 products, 2 customers, 2 transactions)."""
    reset_store(seed=True)
    yield db.session
    db.session.rollback()


@pytest.fixture(scope='function')
def empty_store(app):
    """Store with no records at all."""
    reset_store(seed=False)
    yield db.session
    db.session.rollback()
