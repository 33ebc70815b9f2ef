"""Reports blueprint - dashboard summary, period reports and export rows."""
from flask import Blueprint, jsonify, request

from inventory_dashboard.services.dashboard_service import get_dashboard
from inventory_dashboard.services.report_service import generate_export, generate_report

reports_bp = Blueprint('reports', __name__, url_prefix='/api')


@reports_bp.route('/dashboard', methods=['GET'])
def dashboard():
    return jsonify(get_dashboard())


@reports_bp.route('/reports', methods=['GET'])
def report():
    """
    Report for a time range.

    Query params:
        range: week | month | quarter | year | all (default month)
    """
    granularity = request.args.get('range', 'month')
    return jsonify(generate_report(granularity).to_dict())


@reports_bp.route('/reports/export', methods=['GET'])
def export():
    """
    Export rows for the sales or purchases inside a time range.

    Query params:
        kind: sales | purchases (default sales)
        range: week | month | quarter | year | all (default month)
    """
    kind = request.args.get('kind', 'sales')
    granularity = request.args.get('range', 'month')
    return jsonify(generate_export(kind, granularity))
