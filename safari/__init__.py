import atexit
import logging.config
import os
import weakref

from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_jwt_extended import JWTManager
from flask_migrate import Migrate

db = SQLAlchemy()
migrate = Migrate()
jwt = JWTManager()

# Apps whose engines are disposed at process exit
_apps = weakref.WeakSet()


def create_app(config_object=None):
    app = Flask(__name__)

    if config_object is None:
        from safari.config import config_by_name
        config_object = config_by_name[os.environ.get('SAFARI_ENV', 'development')]
    app.config.from_object(config_object)

    logging.config.dictConfig(app.config['LOGGING'])

    # Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    from safari import errors, guard
    errors.register_error_handlers(app)
    app.before_request(guard.protect_admin_pages)

    from safari.cli import seed_command
    app.cli.add_command(seed_command)

    # Blueprints, then create missing tables
    with app.app_context():
        from safari import admin, routes
        app.register_blueprint(routes.api)
        app.register_blueprint(admin.admin_bp)

        from safari import models  # noqa: F401
        db.create_all()

    _apps.add(app)

    return app


@atexit.register
def _dispose_engines():
    for app in list(_apps):
        with app.app_context():
            db.engine.dispose()
