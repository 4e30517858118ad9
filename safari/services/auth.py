import logging

import bcrypt
from flask import current_app
from flask_jwt_extended import create_access_token
from flask_jwt_extended import decode_token as _decode_jwt
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from safari.errors import AuthError, ValidationError
from safari.models import Admin

logger = logging.getLogger(__name__)


def hash_password(password, rounds=None):
    if rounds is None:
        rounds = current_app.config['BCRYPT_ROUNDS']
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds=rounds)).decode('utf-8')


def check_password(password, hashed):
    try:
        return bcrypt.checkpw(password.encode('utf-8'), hashed.encode('utf-8'))
    except ValueError:
        # malformed hash in storage
        return False


def authenticate(session, username, password):
    if not username or not password:
        raise ValidationError('Username and password are required')

    admin = session.query(Admin).filter_by(username=username).first()

    # Same error whichever check fails
    if admin is None or not admin.is_active or not check_password(password, admin.password):
        logger.warning('Failed admin login for %r', username)
        raise AuthError('Invalid credentials')

    logger.info('Admin %s logged in', admin.username)
    return admin


def issue_token(admin, expires_delta=None):
    kwargs = {'additional_claims': {'username': admin.username}}
    if expires_delta is not None:
        kwargs['expires_delta'] = expires_delta
    return create_access_token(identity=str(admin.id), **kwargs)


def decode_token(token):
    """Verify a session token; returns its claims, or None if it is not valid."""
    if not token:
        return None
    try:
        return _decode_jwt(token)
    except (PyJWTError, JWTExtendedException) as exc:
        logger.info('Session token rejected: %s', exc)
        return None
