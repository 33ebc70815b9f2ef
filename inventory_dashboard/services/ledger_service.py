"""Ledger Service - line items and totals of sales and purchases."""

import logging
from datetime import date as date_cls
from decimal import Decimal
from typing import Any, List, Optional

from inventory_dashboard.exceptions import NotFoundError, ValidationError
from inventory_dashboard.models import Document, LineItem, get_document_type
from inventory_dashboard.record_store import get_store
from inventory_dashboard.services.record_service import next_id
from inventory_dashboard.utils.number_format import parse_decimal, parse_int

logger = logging.getLogger(__name__)


def document_type_for(kind: str):
    """Resolve ``sales`` / ``purchases`` or raise NotFoundError."""
    doc_cls = get_document_type(kind)
    if doc_cls is None:
        raise NotFoundError(f"Unknown document type '{kind}'")
    return doc_cls


def new_document(
    kind: str,
    reference: str = '',
    counterparty: str = '',
    date: Optional[str] = None,
    status: Optional[str] = None
) -> Document:
    """
    Empty document: no items, total 0, status Pending unless given.

    ``date`` defaults to today only when omitted; an empty string is kept.
    """
    doc_cls = document_type_for(kind)
    return doc_cls(
        reference=reference,
        counterparty=counterparty,
        date=date if date is not None else date_cls.today().isoformat(),
        status=status or doc_cls.STATUS.PENDING.value,
        total=Decimal('0'),
        items=[]
    )


def recompute_total(doc: Document) -> Decimal:
    """Set ``doc.total`` to the sum of quantity * price over the current items."""
    doc.total = sum((item.quantity * item.price for item in doc.items), Decimal('0'))
    return doc.total


def add_item(doc: Document, product: Any, quantity: Any = 1) -> Document:
    """
    Add a product to the document or merge it into the existing line.

    A repeated product only increases the quantity of its line; the unit
    price captured on the first add is kept. ``product`` is anything with
    ``id``, ``name`` and ``price`` (a Product); None is a no-op.
    """
    if product is None:
        return doc

    qty = max(1, parse_int(quantity, default=1))
    product_id = parse_int(getattr(product, 'id', None))

    line = doc.find_item(product_id)
    if line:
        line.quantity += qty
    else:
        doc.items.append(LineItem(
            product_id=product_id,
            name=getattr(product, 'name', '') or '',
            quantity=qty,
            price=parse_decimal(getattr(product, 'price', None))
        ))

    recompute_total(doc)
    return doc


def remove_item(doc: Document, product_id: Any) -> Document:
    """Drop the line of ``product_id``; unknown ids leave the document untouched."""
    product_id = parse_int(product_id)
    doc.items = [item for item in doc.items if item.product_id != product_id]
    recompute_total(doc)
    return doc


def next_reference(kind: str, documents: List[Any]) -> str:
    """Prefilled reference for a new document: ``INV004``, ``PO004``..."""
    doc_cls = document_type_for(kind)
    return f"{doc_cls.REFERENCE_PREFIX}{len(documents) + 1:03d}"


def validate_document(doc: Document) -> None:
    """A document needs its counterparty and at least one item before it is saved."""
    missing = []
    if not doc.counterparty:
        missing.append(doc.COUNTERPARTY_KEY)
    if not doc.items:
        missing.append('items')
    if missing:
        raise ValidationError(
            f"Please add {doc.COUNTERPARTY_KEY} and at least one item",
            fields=missing
        )


def load_documents(kind: str) -> List[Document]:
    doc_cls = document_type_for(kind)
    return [doc_cls.from_dict(data) for data in get_store(kind).load()]


def get_document(kind: str, document_id: int) -> Document:
    for doc in load_documents(kind):
        if doc.id == document_id:
            return doc
    raise NotFoundError(f"No {kind} document {document_id}")


def save_document(doc: Document) -> Document:
    """
    Persist a new document.

    The id is assigned here (highest id + 1); after this the document is
    not edited again.
    """
    validate_document(doc)
    recompute_total(doc)

    store = get_store(doc.collection)
    rows = store.load()
    doc.id = next_id(rows)
    if not doc.reference:
        doc.reference = next_reference(doc.collection, rows)
    rows.append(doc.to_dict())
    store.save(rows)

    logger.info(f"Saved {doc.collection} #{doc.id} ({doc.reference}) total={doc.total}")
    return doc
