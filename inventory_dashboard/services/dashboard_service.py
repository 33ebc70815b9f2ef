"""Dashboard Service - all-time totals and the monthly sales/purchases chart."""
import logging
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Sequence

from inventory_dashboard.models import Customer, Document, Product, Purchase, Sale
from inventory_dashboard.services.report_service import parse_record_date, sum_totals
from inventory_dashboard.utils.number_format import to_json_number

logger = logging.getLogger(__name__)


def _month_key(value: Any):
    when = parse_record_date(value)
    return when.strftime('%Y-%m') if when else None


def totals_by_month(documents: Iterable[Document]) -> Dict[str, Decimal]:
    """Sum of ``total`` per ``YYYY-MM``; undated documents are left out."""
    buckets: Dict[str, Decimal] = {}
    for doc in documents:
        key = _month_key(doc.date)
        if key is None:
            continue
        buckets[key] = buckets.get(key, Decimal('0')) + doc.total
    return buckets


def monthly_series(sales: Iterable[Sale], purchases: Iterable[Purchase]) -> List[Dict[str, Any]]:
    """
    Chart points in chronological order.

    Months are keyed by year and month, so March 2023 and March 2024 are two
    separate points. A month with only purchases has sales 0 and vice versa.
    """
    sales_by_month = totals_by_month(sales)
    purchases_by_month = totals_by_month(purchases)
    months = sorted(set(sales_by_month) | set(purchases_by_month))

    return [
        {
            'month': month,
            'sales': to_json_number(sales_by_month.get(month, Decimal('0'))),
            'purchases': to_json_number(purchases_by_month.get(month, Decimal('0'))),
        }
        for month in months
    ]


def build_dashboard(
    products: Sequence[Product],
    sales: Sequence[Sale],
    purchases: Sequence[Purchase],
    customers: Sequence[Customer]
) -> Dict[str, Any]:
    return {
        'totalProducts': len(products),
        'totalSales': to_json_number(sum_totals(sales)),
        'totalPurchases': to_json_number(sum_totals(purchases)),
        'totalCustomers': len(customers),
        'chart': monthly_series(sales, purchases),
    }


def get_dashboard() -> Dict[str, Any]:
    """Dashboard snapshot from the record stores of the current app."""
    from inventory_dashboard.services.ledger_service import load_documents
    from inventory_dashboard.services.record_service import list_records

    return build_dashboard(
        products=list_records('products'),
        sales=load_documents('sales'),
        purchases=load_documents('purchases'),
        customers=list_records('customers')
    )
