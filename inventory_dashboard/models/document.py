"""Sale and purchase documents with their line items."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, ClassVar, Dict, List, Mapping, Tuple
import enum

from inventory_dashboard.utils.number_format import parse_decimal, parse_int, to_json_number


class SaleStatus(enum.Enum):
    """Sale status enum."""
    PENDING = "Pending"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class PurchaseStatus(enum.Enum):
    """Purchase order status enum."""
    PENDING = "Pending"
    RECEIVED = "Received"
    CANCELLED = "Cancelled"


@dataclass
class LineItem:
    """One product / quantity / unit price tuple owned by a document."""
    product_id: int
    name: str
    quantity: int
    price: Decimal

    @property
    def subtotal(self) -> Decimal:
        return self.quantity * self.price

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'LineItem':
        return cls(
            product_id=parse_int(data.get('productId')),
            name=str(data.get('name') or ''),
            quantity=parse_int(data.get('quantity'), default=1),
            price=parse_decimal(data.get('price'))
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'productId': self.product_id,
            'name': self.name,
            'quantity': self.quantity,
            'price': to_json_number(self.price),
        }


@dataclass
class Document:
    """
    Base for documents made of line items.

    ``reference`` and ``counterparty`` are stored under the keys declared by
    each subclass (``invoiceNo``/``customer`` for sales, ``poNumber``/``supplier``
    for purchases). ``total`` is derived from ``items`` by the ledger service.
    """

    collection: ClassVar[str]
    REFERENCE_KEY: ClassVar[str]
    COUNTERPARTY_KEY: ClassVar[str]
    REFERENCE_PREFIX: ClassVar[str]
    STATUS: ClassVar[type]
    SEARCH_FIELDS: ClassVar[Tuple[str, ...]] = ('reference', 'counterparty')

    id: int = 0
    reference: str = ''
    counterparty: str = ''
    date: str = ''
    total: Decimal = Decimal('0')
    status: str = 'Pending'
    items: List[LineItem] = field(default_factory=list)

    @property
    def item_count(self) -> int:
        return len(self.items)

    def find_item(self, product_id: int):
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        return cls(
            id=parse_int(data.get('id')),
            reference=str(data.get(cls.REFERENCE_KEY) or ''),
            counterparty=str(data.get(cls.COUNTERPARTY_KEY) or ''),
            date=str(data.get('date') or ''),
            total=parse_decimal(data.get('total')),
            status=str(data.get('status') or cls.STATUS.PENDING.value),
            items=[LineItem.from_dict(item) for item in data.get('items') or []]
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            self.REFERENCE_KEY: self.reference,
            self.COUNTERPARTY_KEY: self.counterparty,
            'date': self.date,
            'total': to_json_number(self.total),
            'status': self.status,
            'items': [item.to_dict() for item in self.items],
        }


@dataclass
class Sale(Document):
    collection: ClassVar[str] = 'sales'
    REFERENCE_KEY: ClassVar[str] = 'invoiceNo'
    COUNTERPARTY_KEY: ClassVar[str] = 'customer'
    REFERENCE_PREFIX: ClassVar[str] = 'INV'
    STATUS: ClassVar[type] = SaleStatus


@dataclass
class Purchase(Document):
    collection: ClassVar[str] = 'purchases'
    REFERENCE_KEY: ClassVar[str] = 'poNumber'
    COUNTERPARTY_KEY: ClassVar[str] = 'supplier'
    REFERENCE_PREFIX: ClassVar[str] = 'PO'
    STATUS: ClassVar[type] = PurchaseStatus


DOCUMENT_TYPES = {cls.collection: cls for cls in (Sale, Purchase)}


def get_document_type(kind: str):
    """Resolve ``sales`` / ``purchases`` to the document class (None when unknown)."""
    return DOCUMENT_TYPES.get(kind)
