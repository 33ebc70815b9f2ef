"""
Draft Service - the sale / purchase being built in the "Add" dialog.

One draft per document kind, persisted in the ``drafts`` collection so it
survives between requests. A draft is a Document without an id; committing
it goes through ``ledger_service.save_document`` and clears the draft.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional

from inventory_dashboard.exceptions import ValidationError
from inventory_dashboard.models import Document
from inventory_dashboard.record_store import get_store
from inventory_dashboard.services import ledger_service
from inventory_dashboard.services.record_service import find_by_id, list_records
from inventory_dashboard.utils.number_format import parse_int

logger = logging.getLogger(__name__)

DRAFTS_COLLECTION = 'drafts'

HEADER_FIELDS = ('reference', 'counterparty', 'date', 'status')


def _load_rows() -> List[Dict[str, Any]]:
    return get_store(DRAFTS_COLLECTION).load()


def _find_row(rows: List[Dict[str, Any]], kind: str) -> Optional[Dict[str, Any]]:
    for row in rows:
        if row.get('kind') == kind:
            return row
    return None


def _store_draft(kind: str, doc: Document) -> Document:
    rows = [row for row in _load_rows() if row.get('kind') != kind]
    data = doc.to_dict()
    data.pop('id', None)
    data['kind'] = kind
    rows.append(data)
    get_store(DRAFTS_COLLECTION).save(rows)
    return doc


def get_draft(kind: str) -> Document:
    """
    Current draft of ``kind``, or a fresh one.

    A fresh draft has the next reference prefilled and is not persisted
    until it is first changed.
    """
    doc_cls = ledger_service.document_type_for(kind)
    row = _find_row(_load_rows(), kind)
    if row is not None:
        return doc_cls.from_dict(row)

    documents = get_store(kind).load()
    return ledger_service.new_document(kind, reference=ledger_service.next_reference(kind, documents))


def update_draft_header(kind: str, changes: Mapping[str, Any]) -> Document:
    """Set reference, counterparty, date or status of the draft."""
    unknown = [key for key in changes if key not in HEADER_FIELDS]
    if unknown:
        raise ValidationError(f"Unknown draft fields: {', '.join(unknown)}", fields=unknown)

    doc = get_draft(kind)
    if 'status' in changes:
        allowed = [status.value for status in doc.STATUS]
        if changes['status'] not in allowed:
            raise ValidationError(f"Status must be one of: {', '.join(allowed)}", fields=['status'])

    for key in HEADER_FIELDS:
        if key in changes:
            setattr(doc, key, str(changes[key] or '').strip())
    return _store_draft(kind, doc)


def add_to_draft(kind: str, product_id: Any, quantity: Any = 1) -> Document:
    """
    Add a product from the products collection to the draft.

    An unknown product leaves the draft unchanged.
    """
    doc = get_draft(kind)
    product = find_by_id(list_records('products'), parse_int(product_id))
    if product is None:
        logger.warning(f"[DRAFT] Product {product_id} not found, {kind} draft unchanged")
        return doc

    ledger_service.add_item(doc, product, quantity)
    return _store_draft(kind, doc)


def remove_from_draft(kind: str, product_id: Any) -> Document:
    doc = get_draft(kind)
    ledger_service.remove_item(doc, product_id)
    return _store_draft(kind, doc)


def clear_draft(kind: str) -> None:
    """Discard the draft of ``kind``."""
    ledger_service.document_type_for(kind)
    rows = _load_rows()
    remaining = [row for row in rows if row.get('kind') != kind]
    if len(remaining) != len(rows):
        get_store(DRAFTS_COLLECTION).save(remaining)


def commit_draft(kind: str) -> Document:
    """Save the draft as a new document and discard it; a failed validation keeps it."""
    doc = get_draft(kind)
    saved = ledger_service.save_document(doc)
    clear_draft(kind)
    logger.info(f"[DRAFT] Committed {kind} draft as #{saved.id}")
    return saved
