import pytest

from safari import db
from safari.errors import AuthError, ValidationError
from safari.services import auth


def test_authenticate_returns_admin(app, admin):
    assert auth.authenticate(db.session, 'admin', 'admin123') == admin


@pytest.mark.parametrize('username, password', [
    ('admin', 'wrong-password'),
    ('nobody', 'admin123'),
])
def test_authenticate_failures_share_message(app, admin, username, password):
    with pytest.raises(AuthError) as excinfo:
        auth.authenticate(db.session, username, password)
    assert excinfo.value.message == 'Invalid credentials'


def test_inactive_admin_cannot_log_in(app, admin):
    admin.is_active = False
    db.session.commit()

    with pytest.raises(AuthError):
        auth.authenticate(db.session, 'admin', 'admin123')


def test_authenticate_requires_both_fields(app):
    with pytest.raises(ValidationError):
        auth.authenticate(db.session, 'admin', '')


def test_issued_token_round_trips(app, admin):
    claims = auth.decode_token(auth.issue_token(admin))

    assert claims['sub'] == str(admin.id)
    assert claims['username'] == 'admin'
    assert claims['exp'] - claims['iat'] == 24 * 60 * 60


@pytest.mark.parametrize('token', ['', 'garbage', 'a.b.c'])
def test_decode_token_never_raises(app, token):
    assert auth.decode_token(token) is None


def test_check_password_tolerates_bad_hash():
    assert auth.check_password('secret', 'not-a-bcrypt-hash') is False


def test_login_sets_session_cookie(client, admin):
    response = client.post('/admin/login', json={'username': 'admin', 'password': 'admin123'})

    assert response.status_code == 200
    assert response.get_json() == {
        'message': 'Login successful',
        'admin': {'id': admin.id, 'username': 'admin', 'email': 'admin@yalasafari.com'},
    }
    cookie = next(h for h in response.headers.getlist('Set-Cookie') if h.startswith('admin-token='))
    assert 'HttpOnly' in cookie
    assert 'SameSite=Lax' in cookie
    assert 'Max-Age=86400' in cookie
    assert 'Path=/' in cookie
    assert 'Secure' not in cookie


def test_wrong_password_and_unknown_user_look_the_same(client, admin):
    wrong_password = client.post('/admin/login', json={'username': 'admin', 'password': 'nope'})
    unknown_user = client.post('/admin/login', json={'username': 'ghost', 'password': 'admin123'})

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.get_json() == unknown_user.get_json() == {'error': 'Invalid credentials'}
    assert 'Set-Cookie' not in wrong_password.headers


def test_login_missing_fields(client):
    response = client.post('/admin/login', json={'username': 'admin'})

    assert response.status_code == 400
    assert response.get_json() == {'error': 'Username and password are required'}


def test_form_login_redirects_to_dashboard(client, admin):
    response = client.post('/admin/login', data={'username': 'admin', 'password': 'admin123'})

    assert response.status_code == 302
    assert response.headers['Location'].endswith('/admin')
    assert any(h.startswith('admin-token=') for h in response.headers.getlist('Set-Cookie'))


def test_form_login_failure_renders_error(client, admin):
    response = client.post('/admin/login', data={'username': 'admin', 'password': 'nope'})

    assert response.status_code == 401
    assert b'Invalid credentials' in response.data


def test_logout_clears_cookie(admin_client):
    response = admin_client.post('/admin/logout')

    assert response.status_code == 200
    assert response.get_json() == {'message': 'Logged out successfully'}
    assert any(h.startswith('admin-token=;') for h in response.headers.getlist('Set-Cookie'))
    assert admin_client.get('/bookings').status_code == 401
