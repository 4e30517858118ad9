from flask import Blueprint, current_app, g, jsonify, redirect, render_template, request, url_for
from flask_jwt_extended import set_access_cookies, unset_jwt_cookies

from safari import db
from safari.routes import json_payload
from safari.errors import AuthError, ValidationError
from safari.services import auth, bookings, packages, stats

admin_bp = Blueprint('admin', __name__, url_prefix='/admin')


def _set_session_cookie(response, token):
    max_age = int(current_app.config['JWT_ACCESS_TOKEN_EXPIRES'].total_seconds())
    set_access_cookies(response, token, max_age=max_age)


@admin_bp.route('/login', methods=['GET'])
def login_page():
    return render_template('admin/login.html')


@admin_bp.route('/login', methods=['POST'])
def login():
    if request.is_json:
        data = json_payload()
        admin = auth.authenticate(db.session, data.get('username'), data.get('password'))
        response = jsonify({'message': 'Login successful', 'admin': admin.to_dict()})
    else:
        try:
            admin = auth.authenticate(db.session, request.form.get('username'), request.form.get('password'))
        except (AuthError, ValidationError) as error:
            return render_template('admin/login.html', error=error.message), error.status_code
        response = redirect(url_for('admin.dashboard'))

    _set_session_cookie(response, auth.issue_token(admin))
    return response


@admin_bp.route('/logout', methods=['POST'])
def logout():
    response = jsonify({'message': 'Logged out successfully'})
    unset_jwt_cookies(response)
    return response


### PROTECTED PAGES ###

@admin_bp.route('', methods=['GET'])
def dashboard():
    return render_template('admin/dashboard.html', stats=stats.dashboard(db.session),
                           username=g.admin_claims.get('username'))


@admin_bp.route('/bookings', methods=['GET'])
def bookings_page():
    status = request.args.get('status') or None
    return render_template('admin/bookings.html', bookings=bookings.list_bookings(db.session, status),
                           status=status)


@admin_bp.route('/packages', methods=['GET'])
def packages_page():
    return render_template('admin/packages.html', packages=packages.list_all(db.session))
