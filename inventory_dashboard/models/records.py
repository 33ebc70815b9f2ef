"""Flat record entities (one per dashboard collection)."""
from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple
import enum

from inventory_dashboard.exceptions import ValidationError
from inventory_dashboard.utils.number_format import parse_decimal, parse_int, to_json_number


class ContactStatus(enum.Enum):
    """Customer / supplier status."""
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class StoreStatus(enum.Enum):
    """Store status."""
    ENABLE = "Enable"
    DISABLE = "Disable"


def json_key(attr: str) -> str:
    """Persisted key for an attribute name (``total_orders`` -> ``totalOrders``)."""
    head, *rest = attr.split('_')
    return head + ''.join(part.capitalize() for part in rest)


def coerce_field(field_type, value):
    """Convert a raw JSON value to the declared attribute type."""
    if field_type is Decimal:
        return parse_decimal(value)
    if field_type is int:
        return parse_int(value)
    if field_type == Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        return text or None
    return '' if value is None else str(value).strip()


def is_number_input(value) -> bool:
    """Empty input or a finite number; text like "abc" or "NaN" is not."""
    if value is None or value == '':
        return True
    if isinstance(value, bool):
        return False
    return parse_decimal(value, default=None) is not None


class Record:
    """
    Base for flat records persisted as one JSON object each.

    Subclasses are dataclasses and declare:
        collection: record store collection name
        REQUIRED_FIELDS: attributes that must be truthy before a save
        SEARCH_FIELDS: attributes matched by the list search box
        EDITABLE_FIELDS: attributes an update may change (never ``id``)
    """

    collection: ClassVar[str]
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ()
    SEARCH_FIELDS: ClassVar[Tuple[str, ...]] = ()
    EDITABLE_FIELDS: ClassVar[Tuple[str, ...]] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        values = {}
        for f in fields(cls):
            key = json_key(f.name)
            if key in data:
                values[f.name] = coerce_field(f.type, data[key])
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.type is Decimal:
                value = to_json_number(value)
            elif f.type == Optional[str] and value is None:
                continue
            data[json_key(f.name)] = value
        return data

    @classmethod
    def editable_keys(cls) -> Dict[str, str]:
        """Map of accepted payload keys to attribute names."""
        return {json_key(name): name for name in cls.EDITABLE_FIELDS}

    def apply_changes(self, changes: Mapping[str, Any]) -> None:
        """
        Apply a partial update.

        Keys are the persisted (camelCase) names. Anything outside
        EDITABLE_FIELDS is rejected before a single field is written.
        """
        allowed = self.editable_keys()
        unknown = sorted(key for key in changes if key not in allowed)
        if unknown:
            raise ValidationError(
                f"Unknown or read-only fields for {self.collection}: {', '.join(unknown)}",
                fields=unknown
            )

        types = {f.name: f.type for f in fields(self)}
        invalid = sorted(
            key for key, value in changes.items()
            if types[allowed[key]] in (Decimal, int) and not is_number_input(value)
        )
        if invalid:
            raise ValidationError(f"Please enter a valid number for: {', '.join(invalid)}", fields=invalid)

        for key, value in changes.items():
            attr = allowed[key]
            setattr(self, attr, coerce_field(types[attr], value))

    def missing_fields(self) -> list:
        return [json_key(name) for name in self.REQUIRED_FIELDS if not getattr(self, name)]

    def validate(self) -> None:
        """Required-field check run before every save."""
        missing = self.missing_fields()
        if missing:
            raise ValidationError('Please fill in all required fields', fields=missing)


@dataclass
class Product(Record):
    collection: ClassVar[str] = 'products'
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ('name', 'category', 'sku')
    SEARCH_FIELDS: ClassVar[Tuple[str, ...]] = ('name', 'category', 'sku')
    EDITABLE_FIELDS: ClassVar[Tuple[str, ...]] = ('name', 'category', 'price', 'stock', 'sku')

    id: int = 0
    name: str = ''
    category: str = ''
    price: Decimal = Decimal('0')
    stock: int = 0
    sku: str = ''

    def validate(self) -> None:
        super().validate()
        if self.price < 0:
            raise ValidationError('Price cannot be negative', fields=['price'])


@dataclass
class Customer(Record):
    collection: ClassVar[str] = 'customers'
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ('name', 'email', 'phone')
    SEARCH_FIELDS: ClassVar[Tuple[str, ...]] = ('name', 'email', 'phone')
    EDITABLE_FIELDS: ClassVar[Tuple[str, ...]] = (
        'name', 'email', 'phone', 'address', 'total_orders', 'total_spent',
        'status', 'last_order_date'
    )

    id: int = 0
    name: str = ''
    email: str = ''
    phone: str = ''
    address: str = ''
    total_orders: int = 0
    total_spent: Decimal = Decimal('0')
    status: str = ContactStatus.ACTIVE.value
    last_order_date: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status == ContactStatus.ACTIVE.value


@dataclass
class Supplier(Record):
    collection: ClassVar[str] = 'suppliers'
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ('name', 'email', 'phone', 'contact_person')
    SEARCH_FIELDS: ClassVar[Tuple[str, ...]] = ('name', 'email', 'phone', 'contact_person')
    EDITABLE_FIELDS: ClassVar[Tuple[str, ...]] = (
        'name', 'email', 'phone', 'address', 'contact_person', 'total_orders',
        'total_spent', 'status', 'last_order_date', 'payment_terms'
    )

    id: int = 0
    name: str = ''
    email: str = ''
    phone: str = ''
    address: str = ''
    contact_person: str = ''
    total_orders: int = 0
    total_spent: Decimal = Decimal('0')
    status: str = ContactStatus.ACTIVE.value
    last_order_date: Optional[str] = None
    payment_terms: str = ''


@dataclass
class Expense(Record):
    collection: ClassVar[str] = 'expenses'
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ('date', 'category', 'amount')
    SEARCH_FIELDS: ClassVar[Tuple[str, ...]] = ('category', 'description', 'date', 'amount')
    EDITABLE_FIELDS: ClassVar[Tuple[str, ...]] = ('date', 'category', 'amount', 'description')

    id: int = 0
    date: str = ''
    category: str = ''
    amount: Decimal = Decimal('0')
    description: str = ''


@dataclass
class Quotation(Record):
    collection: ClassVar[str] = 'quotations'
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ('date', 'reference', 'customer_name', 'amount', 'status')
    SEARCH_FIELDS: ClassVar[Tuple[str, ...]] = (
        'reference', 'customer_name', 'supplier_name', 'date', 'amount', 'status'
    )
    EDITABLE_FIELDS: ClassVar[Tuple[str, ...]] = (
        'date', 'reference', 'customer_name', 'supplier_name', 'amount', 'status'
    )

    id: int = 0
    date: str = ''
    reference: str = ''
    customer_name: str = ''
    supplier_name: str = ''
    amount: Decimal = Decimal('0')
    status: str = 'Sent'


@dataclass
class Transfer(Record):
    collection: ClassVar[str] = 'transfers'
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ('date', 'reference', 'from_location', 'to_location', 'status')
    SEARCH_FIELDS: ClassVar[Tuple[str, ...]] = ('reference', 'from_location', 'to_location', 'date', 'status')
    EDITABLE_FIELDS: ClassVar[Tuple[str, ...]] = ('date', 'reference', 'from_location', 'to_location', 'status')

    id: int = 0
    date: str = ''
    reference: str = ''
    from_location: str = ''
    to_location: str = ''
    status: str = 'Pending'


@dataclass
class Store(Record):
    collection: ClassVar[str] = 'stores'
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ('name', 'phone', 'email', 'status')
    SEARCH_FIELDS: ClassVar[Tuple[str, ...]] = ('name', 'phone', 'email', 'status')
    EDITABLE_FIELDS: ClassVar[Tuple[str, ...]] = ('name', 'phone', 'email', 'status')

    id: int = 0
    name: str = ''
    phone: str = ''
    email: str = ''
    status: str = StoreStatus.ENABLE.value


@dataclass
class SalesReturn(Record):
    collection: ClassVar[str] = 'salesReturns'
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ('product_name', 'date', 'customer', 'status', 'payment_status')
    SEARCH_FIELDS: ClassVar[Tuple[str, ...]] = (
        'product_name', 'customer', 'date', 'status', 'grand_total', 'paid', 'due', 'payment_status'
    )
    EDITABLE_FIELDS: ClassVar[Tuple[str, ...]] = (
        'product_name', 'date', 'customer', 'status', 'grand_total', 'paid', 'due', 'payment_status'
    )

    id: int = 0
    product_name: str = ''
    date: str = ''
    customer: str = ''
    status: str = 'Pending'
    grand_total: Decimal = Decimal('0')
    paid: Decimal = Decimal('0')
    due: Decimal = Decimal('0')
    payment_status: str = 'Unpaid'

    def validate(self) -> None:
        missing = self.missing_fields()
        if self.grand_total <= 0:
            missing.append('grandTotal')
        if self.paid < 0:
            missing.append('paid')
        if self.due < 0:
            missing.append('due')
        if missing:
            raise ValidationError(
                'Please fill in all required fields and ensure amounts are valid.',
                fields=missing
            )


RECORD_TYPES = {
    cls.collection: cls
    for cls in (Product, Customer, Supplier, Expense, Quotation, Transfer, Store, SalesReturn)
}


def get_record_type(collection: str):
    """Resolve a collection name to its record class (None when unknown)."""
    return RECORD_TYPES.get(collection)
