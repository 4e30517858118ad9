from safari import db
from safari.models import Booking
from safari.services import bookings, stats

VISITOR = {'name': 'Ayesha', 'email': 'ayesha@example.com', 'safariDate': '2026-12-24', 'peopleCount': 2}


def test_dashboard_counts_and_revenue(app, half_day):
    bookings.create(db.session, dict(VISITOR, packageId=half_day.id))
    paid = bookings.create(db.session, dict(VISITOR, packageId=half_day.id, peopleCount=4))
    cancelled = bookings.create(db.session, dict(VISITOR, packageId=half_day.id))
    paid.status = 'PAID'
    cancelled.status = 'CANCELLED'
    db.session.commit()

    assert stats.dashboard(db.session) == {
        'totalBookings': 3,
        'pendingBookings': 1,
        'totalRevenue': 200.0,
    }


def test_dashboard_empty(app):
    assert stats.dashboard(db.session) == {'totalBookings': 0, 'pendingBookings': 0, 'totalRevenue': 0.0}


def test_stats_endpoint(admin_client):
    admin_client.post('/bookings', json=VISITOR)

    response = admin_client.get('/stats')

    assert response.status_code == 200
    assert response.get_json()['totalBookings'] == db.session.query(Booking).count() == 1


def test_stats_endpoint_requires_admin(client):
    assert client.get('/stats').status_code == 401
