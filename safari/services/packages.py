import logging
import math

from safari.errors import NotFoundError, ValidationError, commit
from safari.models import Package
from safari.services import require_text

logger = logging.getLogger(__name__)

TEXT_FIELDS = ('title', 'description', 'duration')
REQUIRED_FIELDS = TEXT_FIELDS + ('price',)

# price x people must fit Numeric(10, 2)
MAX_PRICE = 999999.99
MAX_ID = 2 ** 31 - 1


def parse_price(value):
    """Parse a price to a non-negative float, raising ValidationError otherwise."""
    if isinstance(value, bool):
        raise ValidationError('Invalid price')
    try:
        price = float(value)
    except (TypeError, ValueError):
        raise ValidationError('Invalid price')
    if math.isnan(price) or math.isinf(price) or price < 0 or price > MAX_PRICE:
        raise ValidationError('Invalid price')
    return price


def _image_url(data):
    value = data.get('imageUrl') or None
    if value is not None and not isinstance(value, str):
        raise ValidationError('imageUrl must be a string')
    return value


def _newest_first(query):
    return query.order_by(Package.created_at.desc(), Package.id.desc())


def list_active(session):
    return _newest_first(session.query(Package).filter_by(is_active=True)).all()


def list_all(session):
    return _newest_first(session.query(Package)).all()


def get(session, package_id):
    package = session.get(Package, package_id) if 1 <= package_id <= MAX_ID else None
    if package is None:
        raise NotFoundError('Package not found')
    return package


def create(session, data):
    if any(data.get(field) in (None, '') for field in REQUIRED_FIELDS):
        raise ValidationError()
    require_text(data, TEXT_FIELDS)
    image_url = _image_url(data)

    package = Package(
        title=data['title'],
        description=data['description'],
        duration=data['duration'],
        price=parse_price(data['price']),
        image_url=image_url,
    )
    session.add(package)
    commit(session)

    logger.info('Package %s created: %s', package.id, package.title)
    return package


def update(session, package_id, data):
    package = get(session, package_id)

    supplied = [field for field in TEXT_FIELDS if data.get(field)]
    require_text(data, supplied)
    changes = {field: data[field] for field in supplied}
    if data.get('price') not in (None, ''):
        changes['price'] = parse_price(data['price'])
    if 'imageUrl' in data:
        changes['image_url'] = _image_url(data)
    if data.get('isActive') is not None:
        if not isinstance(data['isActive'], bool):
            raise ValidationError('isActive must be a boolean')
        changes['is_active'] = data['isActive']

    for field, value in changes.items():
        setattr(package, field, value)

    commit(session)
    logger.info('Package %s updated', package.id)
    return package


def soft_delete(session, package_id):
    package = get(session, package_id)
    if package.is_active:
        package.is_active = False
        commit(session)
        logger.info('Package %s deactivated', package.id)
    return package
