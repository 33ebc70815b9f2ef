"""Settings blueprint - read and update the application settings."""
from flask import Blueprint, current_app, jsonify

from inventory_dashboard.blueprints._params import json_body
from inventory_dashboard.services.settings_service import get_settings, update_settings

settings_bp = Blueprint('settings', __name__, url_prefix='/api/settings')


@settings_bp.route('', methods=['GET'])
def show():
    return jsonify(get_settings())


@settings_bp.route('', methods=['PUT'])
def update():
    settings = update_settings(json_body())
    current_app.logger.info("Settings saved")
    return jsonify(settings)
