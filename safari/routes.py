from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from safari import db
from safari.services import bookings, packages, stats

api = Blueprint('api', __name__)


def json_payload():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


### PUBLIC ROUTES ###

@api.route('/packages', methods=['GET'])
def get_packages():
    return jsonify([package.to_dict() for package in packages.list_active(db.session)]), 200


@api.route('/bookings', methods=['POST'])
def create_booking():
    booking = bookings.create(db.session, json_payload())
    return jsonify(booking.to_dict()), 201


### ADMIN ROUTES ###

@api.route('/packages/all', methods=['GET'])
@jwt_required()
def get_all_packages():
    return jsonify([package.to_dict() for package in packages.list_all(db.session)]), 200


@api.route('/packages', methods=['POST'])
@jwt_required()
def create_package():
    package = packages.create(db.session, json_payload())
    return jsonify(package.to_dict()), 201


@api.route('/packages/<int:package_id>', methods=['PUT'])
@jwt_required()
def update_package(package_id):
    package = packages.update(db.session, package_id, json_payload())
    return jsonify(package.to_dict()), 200


@api.route('/packages/<int:package_id>', methods=['DELETE'])
@jwt_required()
def delete_package(package_id):
    packages.soft_delete(db.session, package_id)
    return jsonify({'message': 'Package deleted successfully'}), 200


@api.route('/bookings', methods=['GET'])
@jwt_required()
def get_bookings():
    status = request.args.get('status') or None
    return jsonify([booking.to_dict() for booking in bookings.list_bookings(db.session, status)]), 200


@api.route('/stats', methods=['GET'])
@jwt_required()
def get_stats():
    return jsonify(stats.dashboard(db.session)), 200
