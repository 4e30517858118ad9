# safari/models.py
from datetime import datetime, timezone

from safari import db

BOOKING_STATUSES = ('PENDING', 'PAID', 'CANCELLED')


def _utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _iso(value):
    return value.isoformat() if value is not None else None


class Admin(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(100), unique=True, nullable=False)
    email = db.Column(db.String(255), nullable=False)
    password = db.Column(db.String(100), nullable=False)  # bcrypt hash
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, nullable=False, default=_utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
        }


class Package(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    duration = db.Column(db.String(100), nullable=False)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    image_url = db.Column(db.String(500))
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, nullable=False, default=_utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'duration': self.duration,
            'price': float(self.price),
            'imageUrl': self.image_url,
            'isActive': self.is_active,
            'createdAt': _iso(self.created_at),
            'updatedAt': _iso(self.updated_at),
        }


class Booking(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    safari_date = db.Column(db.Date, nullable=False)
    people_count = db.Column(db.Integer, nullable=False)
    package_id = db.Column(db.Integer, db.ForeignKey('package.id', ondelete='SET NULL'))
    total_amount = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    status = db.Column(db.Enum(*BOOKING_STATUSES, name='booking_status'), nullable=False, default='PENDING')
    created_at = db.Column(db.DateTime, nullable=False, default=_utcnow)

    package = db.relationship('Package', backref=db.backref('bookings', lazy=True))

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'safariDate': self.safari_date.strftime('%Y-%m-%d'),
            'peopleCount': self.people_count,
            'packageId': self.package_id,
            'packageTitle': self.package.title if self.package else None,
            'totalAmount': float(self.total_amount),
            'status': self.status,
            'createdAt': _iso(self.created_at),
        }
