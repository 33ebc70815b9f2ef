"""Models package - exports record entities and documents."""
from inventory_dashboard.models.records import (
    Record, Product, Customer, Supplier, Expense, Quotation, Transfer, Store, SalesReturn,
    ContactStatus, StoreStatus, RECORD_TYPES, get_record_type
)
from inventory_dashboard.models.document import (
    LineItem, Document, Sale, Purchase, SaleStatus, PurchaseStatus,
    DOCUMENT_TYPES, get_document_type
)

__all__ = [
    # Flat records
    'Record', 'Product', 'Customer', 'Supplier', 'Expense', 'Quotation', 'Transfer',
    'Store', 'SalesReturn', 'ContactStatus', 'StoreStatus', 'RECORD_TYPES', 'get_record_type',
    # Documents
    'LineItem', 'Document', 'Sale', 'Purchase', 'SaleStatus', 'PurchaseStatus',
    'DOCUMENT_TYPES', 'get_document_type',
]
