"""
Pytest configuration and shared fixtures.
"""
import pytest

from medcycle import create_app, db


@pytest.fixture
def app():
    """Application bound to a fresh in-memory database."""
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def register_and_login(client, email='jane@example.com', password='password123'):
    client.post('/api/auth/register', json={
        'email': email,
        'password': password,
        'first_name': 'Jane',
        'last_name': 'Doe'
    })
    response = client.post('/api/auth/login', json={'email': email, 'password': password})
    return {'Authorization': f"Bearer {response.get_json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return register_and_login(client)


@pytest.fixture
def other_auth_headers(client):
    return register_and_login(client, email='other@example.com')


@pytest.fixture
def medication_payload():
    return {
        'name': 'Vitamin D3',
        'brand': 'Nature Made',
        'strength': '2000 IU',
        'form': 'softgel',
        'dosage': '1 softgel',
        'frequency': 'daily',
        'time_of_day': 'morning',
        'category': 'vitamin'
    }
