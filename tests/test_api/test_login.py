from config.settings import get_settings


def test_first_login_registers_and_returns_token(client, token_service):
	response = client.post('/login', json={'username': 'alice', 'password': 'password1'})

	assert response.status_code == 200
	token = response.json()['token']
	assert token_service.verify(token) == 'alice'


def test_login_sets_http_only_cookie(client):
	response = client.post('/login', json={'username': 'alice', 'password': 'password1'})

	cookie = response.headers['set-cookie']
	assert cookie.startswith(f'token={response.json()["token"]}')
	assert 'HttpOnly' in cookie
	assert f'Max-Age={get_settings().TOKEN_MAX_AGE_SECONDS}' in cookie
	assert 'Secure' not in cookie


def test_second_login_with_other_password_fails(client):
	client.post('/login', json={'username': 'alice', 'password': 'password1'})

	response = client.post('/login', json={'username': 'alice', 'password': 'password2'})

	assert response.status_code == 401
	assert response.text == 'Invalid username or password'
	assert 'set-cookie' not in response.headers


def test_second_login_with_same_password_succeeds(client):
	client.post('/login', json={'username': 'alice', 'password': 'password1'})

	response = client.post('/login', json={'username': 'alice', 'password': 'password1'})

	assert response.status_code == 200


def test_short_password_rejected_before_auth(client):
	response = client.post('/login', json={'username': 'alice', 'password': 'short'})

	assert response.status_code == 422

	# The rejected attempt must not have registered alice
	response = client.post('/login', json={'username': 'alice', 'password': 'password1'})
	assert response.status_code == 200


def test_long_password_rejected(client):
	response = client.post('/login', json={'username': 'alice', 'password': 'x' * 101})

	assert response.status_code == 422


def test_missing_username_rejected(client):
	response = client.post('/login', json={'password': 'password1'})

	assert response.status_code == 422


def test_login_cookie_grants_access_to_protected_route(client, country_provider):
	country_provider.fetch_by_name.return_value = [{'name': {'common': 'Antarctica'}}]

	assert client.get('/api/name/antarctica').status_code == 401

	client.post('/login', json={'username': 'alice', 'password': 'password1'})
	response = client.get('/api/name/antarctica')

	assert response.status_code == 200
	assert response.json()['name'] == 'Antarctica'
