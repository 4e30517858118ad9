import pytest

from safari import create_app, db
from safari.config import TestingConfig
from safari.models import Admin, Package
from safari.services.auth import hash_password

ADMIN_PASSWORD = 'admin123'


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin(app):
    admin = Admin(username='admin', email='admin@yalasafari.com', password=hash_password(ADMIN_PASSWORD))
    db.session.add(admin)
    db.session.commit()
    return admin


@pytest.fixture
def admin_client(client, admin):
    response = client.post('/admin/login', json={'username': 'admin', 'password': ADMIN_PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture
def half_day(app):
    package = Package(title='Half Day Safari', description='4-hour guided safari tour',
                      duration='4 hours', price=50)
    db.session.add(package)
    db.session.commit()
    return package
