from conftest import create_user


def test_login_logout(client, app):
    create_user(app, 'tech', 'tech@example.com')

    response = client.post('/login', data={'email': 'tech@example.com', 'password': 'password'})
    assert response.status_code == 200
    assert response.get_json() == {'user': 'tech', 'role': 'user'}

    assert client.get('/fields/equipment').status_code == 200

    response = client.post('/logout')
    assert response.status_code == 200
    assert client.get('/fields/equipment').status_code == 401


def test_login_failures(client, app):
    create_user(app, 'tech', 'tech@example.com')

    response = client.post('/login', data={'email': 'tech@example.com', 'password': 'wrong'})
    assert response.status_code == 401
    assert b'Login Unsuccessful' in response.data

    response = client.post('/login', data={'email': ''})
    assert response.status_code == 400


def test_login_issues_csrf_token(client):
    response = client.get('/login')
    assert response.status_code == 200
    assert 'csrfToken' in response.get_json()


def test_seed_admin(app):
    from maintenance_manager.app.database import seed_admin
    from maintenance_manager.app.models import User

    assert seed_admin(app) is None

    app.config['ADMIN_PASSWORD'] = 'secret'
    admin = seed_admin(app)
    assert admin is not None
    with app.app_context():
        user = User.query.filter_by(role='admin').one()
        assert user.check_password('secret')
    assert seed_admin(app) is None
