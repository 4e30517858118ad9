import logging

from flask import current_app, g, redirect, request, url_for
from flask_jwt_extended import unset_jwt_cookies

from safari.services import auth

logger = logging.getLogger(__name__)

ADMIN_PREFIX = '/admin'
PUBLIC_ADMIN_PATHS = ('/admin/login', '/admin/logout')


def is_admin_page(path):
    return path == ADMIN_PREFIX or path.startswith(ADMIN_PREFIX + '/')


def protect_admin_pages():
    """Redirect unauthenticated requests for admin pages to the login page."""
    path = request.path.rstrip('/') or '/'
    if not is_admin_page(path) or path in PUBLIC_ADMIN_PATHS:
        return None

    token = request.cookies.get(current_app.config['JWT_ACCESS_COOKIE_NAME'])
    if not token:
        logger.info('No admin token for %s, redirecting to login', path)
        return redirect(url_for('admin.login_page'))

    claims = auth.decode_token(token)
    if claims is None:
        logger.info('Invalid admin token for %s, clearing cookie', path)
        response = redirect(url_for('admin.login_page'))
        unset_jwt_cookies(response)
        return response

    g.admin_claims = claims
    return None
