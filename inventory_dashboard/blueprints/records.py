"""
Records blueprint - CRUD for the flat collections.

Routes (``<collection>`` is one of products, customers, suppliers, expenses,
quotations, transfers, stores, salesReturns):

- GET    /api/<collection>?q=&page=&per_page=
- POST   /api/<collection>
- GET    /api/<collection>/<id>
- PUT    /api/<collection>/<id>
- DELETE /api/<collection>/<id>
"""
from flask import Blueprint, current_app, jsonify, request

from inventory_dashboard.blueprints._params import json_body, page_params
from inventory_dashboard.exceptions import NotFoundError
from inventory_dashboard.models import RECORD_TYPES
from inventory_dashboard.services import record_service
from inventory_dashboard.services.listing_service import list_page

records_bp = Blueprint('records', __name__, url_prefix='/api')

COLLECTION = f"<any({', '.join(RECORD_TYPES)}):collection>"


@records_bp.route(f'/{COLLECTION}', methods=['GET'])
def list_collection(collection):
    """Search and paginate a collection the way its table does."""
    record_cls = record_service.record_type_for(collection)
    page, per_page = page_params()

    result = list_page(
        record_service.list_records(collection),
        query=request.args.get('q', ''),
        fields=record_cls.SEARCH_FIELDS,
        page=page,
        page_size=per_page
    )
    return jsonify({
        'items': record_service.records_as_dicts(result['items']),
        'count': result['count'],
        'page': result['page'],
        'per_page': result['page_size'],
    })


@records_bp.route(f'/{COLLECTION}', methods=['POST'])
def create(collection):
    record = record_service.create_record(collection, json_body())
    current_app.logger.info(f"Record created: {collection} #{record.id}")
    return jsonify(record.to_dict()), 201


@records_bp.route(f'/{COLLECTION}/<int:record_id>', methods=['GET'])
def detail(collection, record_id):
    return jsonify(record_service.get_record(collection, record_id).to_dict())


@records_bp.route(f'/{COLLECTION}/<int:record_id>', methods=['PUT'])
def update(collection, record_id):
    record = record_service.update_record(collection, record_id, json_body())
    return jsonify(record.to_dict())


@records_bp.route(f'/{COLLECTION}/<int:record_id>', methods=['DELETE'])
def delete(collection, record_id):
    if not record_service.delete_record(collection, record_id):
        raise NotFoundError(f"No record {record_id} in {collection}")
    current_app.logger.info(f"Record deleted: {collection} #{record_id}")
    return jsonify({'status': 'success', 'id': record_id})
