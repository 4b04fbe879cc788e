"""
Shared pytest fixtures.

Each test gets a fresh application backed by its own in-memory database.
"""

import pytest

from app import create_app, init_db
from models import db

FORM_TOKEN = 'test-form-token'


@pytest.fixture
def app():
    app = create_app('testing')
    init_db(app)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def app_context(app):
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def form_token():
    return FORM_TOKEN


@pytest.fixture
def admin_client(client):
    with client.session_transaction() as sess:
        sess['is_admin'] = True
        sess['csrf_token'] = FORM_TOKEN
    return client
