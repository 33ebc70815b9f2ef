import pytest
from datetime import datetime
from decimal import Decimal

from inventory_dashboard import create_app
from inventory_dashboard.models import Product
from inventory_dashboard.services.ledger_service import add_item, new_document


@pytest.fixture(scope='function')
def app():
    """Create application instance for testing (fresh in-memory stores per test)."""
    app = create_app('config.TestingConfig')
    return app


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def app_context(app):
    """Push an application context for service-level tests."""
    with app.app_context():
        yield app


@pytest.fixture(scope='function')
def store_registry(app):
    """Record store registry of the test app."""
    return app.extensions['record_stores']


@pytest.fixture
def products():
    """A small catalogue used to build documents."""
    return {
        1: Product(id=1, name='Laptop', category='Electronics', price=Decimal('999.99'), stock=50, sku='LAP001'),
        2: Product(id=2, name='Smartphone', category='Electronics', price=Decimal('699.99'), stock=100, sku='PHN001'),
        3: Product(id=3, name='Headphones', category='Accessories', price=Decimal('99.99'), stock=200, sku='HD001'),
        5: Product(id=5, name='Keyboard', category='Accessories', price=Decimal('49.99'), stock=150, sku='KB001'),
    }


@pytest.fixture
def make_sale():
    """Build a sale from ``(product, quantity)`` pairs, or with a fixed total and no items."""
    counter = {'id': 0}

    def _make(date, lines=(), total=None, customer='Customer'):
        counter['id'] += 1
        sale = new_document('sales', reference=f"INV{counter['id']:03d}", counterparty=customer, date=date)
        for product, quantity in lines:
            add_item(sale, product, quantity)
        if total is not None:
            sale.total = Decimal(str(total))
        sale.id = counter['id']
        return sale

    return _make


@pytest.fixture
def fixed_now():
    return datetime(2024, 2, 15)
