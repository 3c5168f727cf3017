import pytest
from maintenance_manager.app import create_app, db
from maintenance_manager.app.models import User
from maintenance_manager.config import TestConfig


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def create_user(app, username, email, role='user', password='password'):
    with app.app_context():
        user = User(username=username, email=email, role=role)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()


@pytest.fixture
def admin_client(app):
    create_user(app, 'admin', 'admin@example.com', role='admin')
    client = app.test_client()
    client.post('/login', data={'email': 'admin@example.com', 'password': 'password'})
    return client


@pytest.fixture
def user_client(app):
    create_user(app, 'tech', 'tech@example.com')
    client = app.test_client()
    client.post('/login', data={'email': 'tech@example.com', 'password': 'password'})
    return client
