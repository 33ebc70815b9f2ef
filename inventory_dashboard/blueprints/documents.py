"""
Documents blueprint - sales, purchases and their drafts.

Saved documents are read-only; new ones are built in the draft of their
kind and committed.
"""
from flask import Blueprint, current_app, jsonify, request

from inventory_dashboard.blueprints._params import json_body, page_params
from inventory_dashboard.models import Document
from inventory_dashboard.services import draft_service, ledger_service
from inventory_dashboard.services.listing_service import list_page

documents_bp = Blueprint('documents', __name__, url_prefix='/api')

KIND = '<any(sales, purchases):kind>'


def _draft_response(kind: str, doc: Document):
    data = doc.to_dict()
    data.pop('id', None)
    data['kind'] = kind
    data['itemCount'] = doc.item_count
    return jsonify(data)


@documents_bp.route(f'/{KIND}', methods=['GET'])
def list_documents(kind):
    """List documents; ``q`` matches the reference and the counterparty."""
    doc_cls = ledger_service.document_type_for(kind)
    page, per_page = page_params()

    result = list_page(
        ledger_service.load_documents(kind),
        query=request.args.get('q', ''),
        fields=doc_cls.SEARCH_FIELDS,
        page=page,
        page_size=per_page
    )
    return jsonify({
        'items': [doc.to_dict() for doc in result['items']],
        'count': result['count'],
        'page': result['page'],
        'per_page': result['page_size'],
    })


@documents_bp.route(f'/{KIND}/<int:document_id>', methods=['GET'])
def detail(kind, document_id):
    return jsonify(ledger_service.get_document(kind, document_id).to_dict())


@documents_bp.route(f'/{KIND}/draft', methods=['GET'])
def get_draft(kind):
    return _draft_response(kind, draft_service.get_draft(kind))


@documents_bp.route(f'/{KIND}/draft', methods=['PATCH'])
def update_draft(kind):
    return _draft_response(kind, draft_service.update_draft_header(kind, json_body()))


@documents_bp.route(f'/{KIND}/draft', methods=['DELETE'])
def clear_draft(kind):
    draft_service.clear_draft(kind)
    return jsonify({'status': 'success'})


@documents_bp.route(f'/{KIND}/draft/items', methods=['POST'])
def add_draft_item(kind):
    """Body: ``{"productId": 1, "quantity": 2}``; quantity defaults to 1."""
    data = json_body()
    doc = draft_service.add_to_draft(kind, data.get('productId'), data.get('quantity', 1))
    return _draft_response(kind, doc)


@documents_bp.route(f'/{KIND}/draft/items/<int:product_id>', methods=['DELETE'])
def remove_draft_item(kind, product_id):
    return _draft_response(kind, draft_service.remove_from_draft(kind, product_id))


@documents_bp.route(f'/{KIND}/draft/commit', methods=['POST'])
def commit_draft(kind):
    doc = draft_service.commit_draft(kind)
    current_app.logger.info(f"{kind} #{doc.id} saved ({doc.reference}, total {doc.total})")
    return jsonify(doc.to_dict()), 201
