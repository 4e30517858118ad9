import logging

import click
from flask import current_app
from flask.cli import with_appcontext

from safari import db
from safari.errors import commit
from safari.models import Admin, Package
from safari.services.auth import hash_password

logger = logging.getLogger(__name__)

SAMPLE_PACKAGES = [
    {
        'title': 'Half Day Safari',
        'description': "Experience Yala's wildlife in a 4-hour guided safari tour",
        'duration': '4 hours',
        'price': 50.0,
        'image_url': '/images/half-day-safari.jpg',
    },
    {
        'title': 'Full Day Safari',
        'description': 'Complete day exploring Yala with lunch included',
        'duration': '8 hours',
        'price': 120.0,
        'image_url': '/images/full-day-safari.jpg',
    },
    {
        'title': 'Photography Safari',
        'description': 'Specialized safari for wildlife photography enthusiasts',
        'duration': '6 hours',
        'price': 180.0,
        'image_url': '/images/photography-safari.jpg',
    },
]


def seed(session, username, password, email):
    """Create the default admin and sample packages; safe to run repeatedly."""
    created = 0

    if session.query(Admin).filter_by(username=username).first() is None:
        session.add(Admin(username=username, email=email, password=hash_password(password), is_active=True))
        created += 1

    for data in SAMPLE_PACKAGES:
        # title is the de-dup key
        if session.query(Package).filter_by(title=data['title']).first() is None:
            session.add(Package(**data))
            created += 1

    commit(session)
    return created


@click.command('seed')
@with_appcontext
def seed_command():
    """Create the default admin user and sample packages."""
    config = current_app.config
    created = seed(db.session, config['SEED_ADMIN_USERNAME'], config['SEED_ADMIN_PASSWORD'],
                   config['SEED_ADMIN_EMAIL'])
    logger.info('Seed created %d rows', created)
    click.echo(f'Seed completed: {created} new rows. Admin username: {config["SEED_ADMIN_USERNAME"]}')
