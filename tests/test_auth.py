def test_health(client):
    response = client.get('/api/health')
    assert response.status_code == 200
    assert response.get_json()['status'] == 'healthy'


def test_register_returns_user_and_tokens(client):
    response = client.post('/api/auth/register', json={
        'email': ' New.User@Example.com ',
        'password': 'password123',
        'first_name': 'New',
        'last_name': 'User'
    })
    body = response.get_json()

    assert response.status_code == 201
    assert body['user']['email'] == 'new.user@example.com'
    assert 'password_hash' not in body['user']
    assert body['access_token'] and body['refresh_token']


def test_register_validation(client):
    response = client.post('/api/auth/register', json={'email': 'not-an-email', 'password': 'short'})
    body = response.get_json()

    assert response.status_code == 400
    assert body['error'] == 'Validation failed'
    assert {'email', 'password', 'first_name', 'last_name'} <= set(body['details'])


def test_register_duplicate_email(client, auth_headers):
    response = client.post('/api/auth/register', json={
        'email': 'jane@example.com',
        'password': 'password123',
        'first_name': 'Jane',
        'last_name': 'Again'
    })
    assert response.status_code == 409


def test_login_wrong_password(client, auth_headers):
    response = client.post('/api/auth/login', json={'email': 'jane@example.com', 'password': 'wrong-password'})
    assert response.status_code == 401


def test_login_records_last_login(client, auth_headers):
    response = client.post('/api/auth/login', json={'email': 'jane@example.com', 'password': 'password123'})
    assert response.status_code == 200
    assert response.get_json()['user']['last_login_at'] is not None


def test_current_user(client, auth_headers):
    response = client.get('/api/auth/user', headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json()['user']['first_name'] == 'Jane'


def test_protected_route_requires_token(client):
    assert client.get('/api/medications').status_code == 401


def test_refresh_issues_new_access_token(client, auth_headers):
    login = client.post('/api/auth/login', json={'email': 'jane@example.com', 'password': 'password123'})
    refresh_token = login.get_json()['refresh_token']

    response = client.post('/api/auth/refresh', headers={'Authorization': f'Bearer {refresh_token}'})
    assert response.status_code == 200
    new_headers = {'Authorization': f"Bearer {response.get_json()['access_token']}"}
    assert client.get('/api/auth/user', headers=new_headers).status_code == 200


def test_logout(client, auth_headers):
    response = client.post('/api/auth/logout', headers=auth_headers)
    assert response.status_code == 200
