import logging

from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError

from safari import db, jwt

logger = logging.getLogger(__name__)


class SafariError(Exception):
    """Base error; carries the HTTP status the API answers with."""

    status_code = 500
    message = 'Internal server error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class ValidationError(SafariError):
    status_code = 400
    message = 'Missing required fields'


class AuthError(SafariError):
    status_code = 401
    message = 'Invalid credentials'


class NotFoundError(SafariError):
    status_code = 404
    message = 'Not found'


class StorageError(SafariError):
    status_code = 500


def commit(session):
    """Commit the session, turning driver failures into StorageError."""
    try:
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception('Commit failed')
        raise StorageError() from exc


def register_error_handlers(app):

    @app.errorhandler(SafariError)
    def handle_safari_error(error):
        return jsonify({'error': error.message}), error.status_code

    @app.errorhandler(SQLAlchemyError)
    def handle_storage_failure(error):
        db.session.rollback()
        logger.exception('Storage failure: %s', error)
        return jsonify({'error': StorageError.message}), StorageError.status_code


@jwt.unauthorized_loader
def _missing_token(reason):
    return jsonify({'error': 'Authentication required'}), 401


@jwt.invalid_token_loader
def _invalid_token(reason):
    logger.info('Rejected admin token: %s', reason)
    return jsonify({'error': 'Invalid session'}), 401


@jwt.expired_token_loader
def _expired_token(jwt_header, jwt_payload):
    return jsonify({'error': 'Session expired'}), 401
