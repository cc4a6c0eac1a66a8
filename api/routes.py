"""
Tracker API Endpoints

JSON endpoints used by the tracker front-end. Each request reloads the
spreadsheet and the status file through the app's TrackerService.
"""

from flask import Blueprint, current_app, jsonify, request
import logging

from app.errors import ValidationError
from services.tracker_service import TrackerService
from utils.validators import (
    get_json_payload,
    get_filter,
    validate_status_update,
    validate_credentials
)

logger = logging.getLogger(__name__)

api_bp = Blueprint('api', __name__, url_prefix='/api')


def get_service() -> TrackerService:
    return current_app.extensions['tracker_service']


@api_bp.route('/health', methods=['GET'])
def health():
    return jsonify({'ok': True})


@api_bp.route('/meta', methods=['GET'])
def meta():
    """Aircraft and system lists for the filter dropdowns"""
    return jsonify(get_service().get_meta())


@api_bp.route('/login', methods=['POST'])
def login():
    user_id, password = validate_credentials(get_json_payload(request))
    get_service().login(user_id, password)
    return jsonify({'success': True})


@api_bp.route('/search', methods=['POST'])
def search():
    payload = get_json_payload(request)
    result = get_service().search(
        aircraft=get_filter(payload, 'aircraft'),
        system=get_filter(payload, 'system')
    )
    return jsonify(result.to_dict())


@api_bp.route('/update-status', methods=['POST'])
def update_status():
    """Set one AJL to OPEN/CLOSED and return the refreshed summary"""
    is_valid, error, ajl, status = validate_status_update(get_json_payload(request))
    if not is_valid:
        raise ValidationError(error, field='ajl')

    summary = get_service().update_status(ajl, status)
    return jsonify({'success': True, 'summary': summary.to_dict()})


@api_bp.route('/status-summary', methods=['GET'])
def status_summary():
    """Open/closed counts for the pie chart"""
    return jsonify(get_service().get_summary().to_dict())
