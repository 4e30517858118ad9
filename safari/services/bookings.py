import datetime
import logging
from decimal import Decimal

from safari.errors import ValidationError, commit
from safari.models import BOOKING_STATUSES, Booking, Package
from safari.services import require_text
from safari.services.packages import MAX_ID

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('name', 'email', 'safariDate', 'peopleCount')
MAX_PEOPLE_COUNT = 100


def parse_safari_date(value):
    if isinstance(value, datetime.date):
        return value
    try:
        return datetime.datetime.fromisoformat(str(value).replace('Z', '')).date()
    except ValueError:
        raise ValidationError('Invalid safariDate')


def parse_people_count(value):
    if isinstance(value, bool):
        raise ValidationError('Invalid peopleCount')
    try:
        count = int(value)
    except (TypeError, ValueError):
        raise ValidationError('Invalid peopleCount')
    if count < 1:
        raise ValidationError('peopleCount must be at least 1')
    if count > MAX_PEOPLE_COUNT:
        raise ValidationError(f'peopleCount must be at most {MAX_PEOPLE_COUNT}')
    return count


def resolve_package(session, package_id):
    """Return the referenced package, or None when it is absent or unknown."""
    if package_id in (None, '') or isinstance(package_id, bool):
        return None
    try:
        package_id = int(package_id)
    except (TypeError, ValueError):
        return None
    if not 1 <= package_id <= MAX_ID:
        return None
    return session.get(Package, package_id)


def create(session, data):
    if any(not data.get(field) for field in REQUIRED_FIELDS):
        raise ValidationError()
    require_text(data, ('name', 'email'))

    safari_date = parse_safari_date(data['safariDate'])
    people_count = parse_people_count(data['peopleCount'])

    package = resolve_package(session, data.get('packageId'))
    if package is not None:
        total_amount = Decimal(str(package.price)) * people_count
    else:
        total_amount = Decimal('0')

    booking = Booking(
        name=data['name'],
        email=data['email'],
        safari_date=safari_date,
        people_count=people_count,
        package=package,
        total_amount=total_amount,
        status='PENDING',
    )
    session.add(booking)
    commit(session)

    logger.info('Booking %s created for %s (%s people, total %s)',
                booking.id, booking.email, people_count, total_amount)
    return booking


def list_bookings(session, status=None):
    query = session.query(Booking)
    if status:
        if status not in BOOKING_STATUSES:
            raise ValidationError('Invalid status value')
        query = query.filter_by(status=status)
    return query.order_by(Booking.created_at.desc(), Booking.id.desc()).all()
