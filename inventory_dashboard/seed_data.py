"""
Mock data written to a collection the first time it is loaded.

Sales and purchases are built through the ledger service so that every
seeded total equals the sum of its line items.
"""
from inventory_dashboard.models import Product


PRODUCTS = [
    {'id': 1, 'name': 'Laptop', 'category': 'Electronics', 'price': 999.99, 'stock': 50, 'sku': 'LAP001'},
    {'id': 2, 'name': 'Smartphone', 'category': 'Electronics', 'price': 699.99, 'stock': 100, 'sku': 'PHN001'},
    {'id': 3, 'name': 'Headphones', 'category': 'Accessories', 'price': 99.99, 'stock': 200, 'sku': 'HD001'},
    {'id': 4, 'name': 'Monitor', 'category': 'Electronics', 'price': 299.99, 'stock': 75, 'sku': 'MON001'},
    {'id': 5, 'name': 'Keyboard', 'category': 'Accessories', 'price': 49.99, 'stock': 150, 'sku': 'KB001'},
]

CUSTOMERS = [
    {
        'id': 1, 'name': 'John Doe', 'email': 'john.doe@example.com', 'phone': '555-0101',
        'address': '123 Main St, City, State 12345', 'totalOrders': 5, 'totalSpent': 2499.99,
        'status': 'Active', 'lastOrderDate': '2024-03-15',
    },
    {
        'id': 2, 'name': 'Jane Smith', 'email': 'jane.smith@example.com', 'phone': '555-0102',
        'address': '456 Oak Ave, City, State 12345', 'totalOrders': 3, 'totalSpent': 1499.99,
        'status': 'Active', 'lastOrderDate': '2024-03-14',
    },
    {
        'id': 3, 'name': 'Mike Johnson', 'email': 'mike.johnson@example.com', 'phone': '555-0103',
        'address': '789 Pine Rd, City, State 12345', 'totalOrders': 2, 'totalSpent': 799.99,
        'status': 'Inactive', 'lastOrderDate': '2024-02-28',
    },
]

SUPPLIERS = [
    {
        'id': 1, 'name': 'Tech Supplies Inc.', 'email': 'contact@techsupplies.com', 'phone': '555-0101',
        'address': '123 Tech Park, Silicon Valley, CA 94025', 'contactPerson': 'John Smith',
        'totalOrders': 15, 'totalSpent': 24999.99, 'status': 'Active',
        'lastOrderDate': '2024-03-15', 'paymentTerms': 'Net 30',
    },
    {
        'id': 2, 'name': 'Office Depot', 'email': 'orders@officedepot.com', 'phone': '555-0102',
        'address': '456 Business Ave, New York, NY 10001', 'contactPerson': 'Sarah Johnson',
        'totalOrders': 8, 'totalSpent': 14999.99, 'status': 'Active',
        'lastOrderDate': '2024-03-14', 'paymentTerms': 'Net 45',
    },
    {
        'id': 3, 'name': 'Global Electronics', 'email': 'sales@globalelectronics.com', 'phone': '555-0103',
        'address': '789 Industrial Zone, Chicago, IL 60601', 'contactPerson': 'Mike Brown',
        'totalOrders': 5, 'totalSpent': 7999.99, 'status': 'Inactive',
        'lastOrderDate': '2024-02-28', 'paymentTerms': 'Net 60',
    },
]

EXPENSES = [
    {'id': 1, 'date': '2024-03-15', 'category': 'Office Supplies', 'amount': 150.75, 'description': 'Purchase of paper and pens'},
    {'id': 2, 'date': '2024-03-14', 'category': 'Utilities', 'amount': 300.50, 'description': 'Monthly electricity bill'},
    {'id': 3, 'date': '2024-03-13', 'category': 'Travel', 'amount': 500, 'description': 'Business trip to conference'},
    {'id': 4, 'date': '2024-03-12', 'category': 'Marketing', 'amount': 200, 'description': 'Online ad campaign'},
    {'id': 5, 'date': '2024-03-11', 'category': 'Salaries', 'amount': 5000, 'description': 'Monthly payroll'},
]

QUOTATIONS = [
    {'id': 1, 'date': '2024-03-20', 'reference': 'Q1001', 'customerName': 'Alpha Retail', 'supplierName': 'Beta Supply', 'amount': 1200.50, 'status': 'Sent'},
    {'id': 2, 'date': '2024-03-19', 'reference': 'Q1002', 'customerName': 'Gamma Corp', 'supplierName': 'Delta Goods', 'amount': 3500, 'status': 'Accepted'},
    {'id': 3, 'date': '2024-03-18', 'reference': 'Q1003', 'customerName': 'Alpha Retail', 'supplierName': 'Epsilon Mart', 'amount': 750.20, 'status': 'Rejected'},
]

TRANSFERS = [
    {'id': 1, 'date': '2024-03-22', 'reference': 'TRF001', 'fromLocation': 'Warehouse A', 'toLocation': 'Store 1', 'status': 'Completed'},
    {'id': 2, 'date': '2024-03-21', 'reference': 'TRF002', 'fromLocation': 'Store 2', 'toLocation': 'Warehouse B', 'status': 'Pending'},
    {'id': 3, 'date': '2024-03-20', 'reference': 'TRF003', 'fromLocation': 'Warehouse A', 'toLocation': 'Warehouse B', 'status': 'Completed'},
]

STORES = [
    {'id': 1, 'name': 'Store 1', 'phone': '123-456-7890', 'email': 'store1@example.com', 'status': 'Enable'},
    {'id': 2, 'name': 'Store 2', 'phone': '987-654-3210', 'email': 'store2@example.com', 'status': 'Enable'},
    {'id': 3, 'name': 'Warehouse', 'phone': '555-555-5555', 'email': 'warehouse@example.com', 'status': 'Enable'},
]

SALES_RETURNS = [
    {'id': 1, 'productName': 'Macbook Pro', 'date': '2024-03-15', 'customer': 'Thomas', 'status': 'Received', 'grandTotal': 550, 'paid': 120, 'due': 430, 'paymentStatus': 'Partial'},
    {'id': 2, 'productName': 'Orange', 'date': '2024-03-14', 'customer': 'Benjamin', 'status': 'Pending', 'grandTotal': 50, 'paid': 0, 'due': 50, 'paymentStatus': 'Unpaid'},
    {'id': 3, 'productName': 'Pineapple', 'date': '2024-03-13', 'customer': 'James', 'status': 'Pending', 'grandTotal': 30, 'paid': 30, 'due': 0, 'paymentStatus': 'Paid'},
]

# (id, reference, counterparty, date, status, [(product_id, quantity), ...])
SALES = [
    (1, 'INV001', 'John Doe', '2024-03-15', 'Completed', [(1, 1), (3, 1)]),
    (2, 'INV002', 'Jane Smith', '2024-03-14', 'Pending', [(2, 1), (5, 2)]),
    (3, 'INV003', 'Mike Johnson', '2024-03-13', 'Cancelled', [(3, 1), (5, 1)]),
]

PURCHASES = [
    (1, 'PO001', 'Tech Supplies Inc.', '2024-03-15', 'Received', [(1, 2), (3, 5)]),
    (2, 'PO002', 'Office Depot', '2024-03-14', 'Pending', [(2, 1), (5, 2)]),
    (3, 'PO003', 'Global Electronics', '2024-03-13', 'Cancelled', [(4, 3), (5, 4)]),
]


def _copy(rows):
    return [dict(row) for row in rows]


def _documents(kind, rows):
    from inventory_dashboard.services.ledger_service import new_document, add_item

    products = {row['id']: Product.from_dict(row) for row in PRODUCTS}
    documents = []
    for doc_id, reference, counterparty, date, status, lines in rows:
        doc = new_document(kind, reference=reference, counterparty=counterparty, date=date, status=status)
        for product_id, quantity in lines:
            add_item(doc, products.get(product_id), quantity)
        doc.id = doc_id
        documents.append(doc.to_dict())
    return documents


SEED_FACTORIES = {
    'products': lambda: _copy(PRODUCTS),
    'customers': lambda: _copy(CUSTOMERS),
    'suppliers': lambda: _copy(SUPPLIERS),
    'expenses': lambda: _copy(EXPENSES),
    'quotations': lambda: _copy(QUOTATIONS),
    'transfers': lambda: _copy(TRANSFERS),
    'stores': lambda: _copy(STORES),
    'salesReturns': lambda: _copy(SALES_RETURNS),
    'sales': lambda: _documents('sales', SALES),
    'purchases': lambda: _documents('purchases', PURCHASES),
}
