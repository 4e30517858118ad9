from safari import db
from safari.models import Admin, Package
from safari.services import auth


def test_seed_creates_admin_and_packages(app):
    result = app.test_cli_runner().invoke(args=['seed'])

    assert result.exit_code == 0
    assert 'Seed completed: 4 new rows' in result.output
    assert sorted(p.title for p in db.session.query(Package)) == [
        'Full Day Safari', 'Half Day Safari', 'Photography Safari',
    ]
    assert auth.authenticate(db.session, 'admin', 'admin123').email == 'admin@yalasafari.com'


def test_seed_is_idempotent(app, half_day):
    runner = app.test_cli_runner()
    runner.invoke(args=['seed'])
    result = runner.invoke(args=['seed'])

    assert 'Seed completed: 0 new rows' in result.output
    assert db.session.query(Package).filter_by(title='Half Day Safari').count() == 1
    assert db.session.query(Admin).count() == 1
