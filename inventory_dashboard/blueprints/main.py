"""Main blueprint with the health check endpoint."""
from flask import Blueprint, current_app, jsonify

from inventory_dashboard.exceptions import StorageError
from inventory_dashboard.record_store import get_registry

main_bp = Blueprint('main', __name__)


@main_bp.route('/health')
def health():
    """
    Health check endpoint that validates the record store.

    Returns:
        200: Healthy (products collection readable)
        500: Unhealthy (store error)
    """
    registry = get_registry()
    try:
        registry.get('products').load()
    except StorageError as e:
        current_app.logger.error(f"Health check failed: {e.message}")
        return jsonify({
            'status': 'unhealthy',
            'backend': registry.backend,
            'error': e.message,
            'message': 'Record store unavailable'
        }), 500

    return jsonify({
        'status': 'healthy',
        'backend': registry.backend,
        'message': 'Record store reachable'
    }), 200
