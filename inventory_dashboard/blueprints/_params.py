"""Query-string and body helpers shared by the API blueprints."""
from flask import current_app, request

from inventory_dashboard.exceptions import ValidationError


def page_params():
    """
    ``page`` (zero-based) and ``per_page`` from the query string.

    ``per_page`` defaults to DEFAULT_PAGE_SIZE and is capped at MAX_PAGE_SIZE.
    """
    default_size = current_app.config.get('DEFAULT_PAGE_SIZE', 5)
    max_size = current_app.config.get('MAX_PAGE_SIZE', 100)

    page = request.args.get('page', 0, type=int)
    per_page = request.args.get('per_page', default_size, type=int)
    return page, min(per_page, max_size)


def json_body():
    """Request body as a dict, or ValidationError when it is not a JSON object."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data
