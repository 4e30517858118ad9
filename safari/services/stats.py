from sqlalchemy import func

from safari.models import Booking


def dashboard(session):
    total_bookings = session.query(func.count(Booking.id)).scalar()
    pending_bookings = session.query(func.count(Booking.id)).filter(Booking.status == 'PENDING').scalar()
    revenue = session.query(func.coalesce(func.sum(Booking.total_amount), 0)).filter(Booking.status == 'PAID').scalar()

    return {
        'totalBookings': total_bookings,
        'pendingBookings': pending_bookings,
        'totalRevenue': float(revenue),
    }
