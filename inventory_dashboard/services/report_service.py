"""
Report service - period summaries for the Reports view.

Everything here is a pure function of the records passed in plus ``now``;
``generate_report`` and ``generate_export`` only add the record store reads.
A report is rebuilt from scratch on every call.
"""

import calendar
import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from inventory_dashboard.exceptions import ValidationError
from inventory_dashboard.models import Customer, Document, Product, Purchase, Sale
from inventory_dashboard.utils.number_format import to_json_number

logger = logging.getLogger(__name__)

GRANULARITIES = ('week', 'month', 'quarter', 'year', 'all')

# Months covered by one window of each granularity ('week' is handled in days)
_MONTH_SPANS = {'month': 1, 'quarter': 3, 'year': 12}

EXPORT_COLUMNS = ('reference', 'counterparty', 'date', 'items', 'total', 'status')

EXPORT_HEADERS = {
    'sales': ('Invoice No', 'Customer', 'Date', 'Items', 'Total', 'Status'),
    'purchases': ('PO Number', 'Supplier', 'Date', 'Items', 'Total', 'Status'),
}


def shift_months(moment: datetime, months: int) -> datetime:
    """Move ``moment`` by whole months, clamping the day (Mar 31 - 1 month -> Feb 29)."""
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def _step_back(now: datetime, granularity: str, steps: int) -> datetime:
    if granularity == 'week':
        return now - timedelta(days=7 * steps)
    return shift_months(now, -_MONTH_SPANS[granularity] * steps)


def parse_record_date(value: Any) -> Optional[datetime]:
    """
    Parse a stored ``date`` field.

    Accepts ``YYYY-MM-DD`` (midnight), full ISO datetimes, ``date`` and
    ``datetime``. Anything else is None, and such records never fall inside
    a bounded window.
    """
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.strip()).replace(tzinfo=None)
    except ValueError:
        return None


@dataclass(frozen=True)
class ReportWindow:
    """
    Current and previous period for a granularity.

    ``start`` is None for 'all' (no lower bound); the current window has no
    upper bound so future-dated records count as current. The previous
    window is ``[previous_start, previous_end)`` and does not exist for 'all'.
    """
    granularity: str
    end: datetime
    start: Optional[datetime] = None
    previous_start: Optional[datetime] = None
    previous_end: Optional[datetime] = None

    @property
    def has_previous(self) -> bool:
        return self.previous_start is not None

    def contains(self, value: Any) -> bool:
        if self.start is None:
            return True
        when = parse_record_date(value)
        return when is not None and when >= self.start

    def contains_previous(self, value: Any) -> bool:
        if not self.has_previous:
            return False
        when = parse_record_date(value)
        return when is not None and self.previous_start <= when < self.previous_end

    def to_dict(self) -> Dict[str, Any]:
        return {
            'granularity': self.granularity,
            'start': self.start.isoformat() if self.start else None,
            'end': self.end.isoformat(),
            'previousStart': self.previous_start.isoformat() if self.previous_start else None,
            'previousEnd': self.previous_end.isoformat() if self.previous_end else None,
        }


def compute_window(granularity: str, now: Optional[datetime] = None) -> ReportWindow:
    """
    Window for ``now`` and a granularity.

    Example (month, now 2024-02-15): current from 2024-01-15,
    previous [2023-12-15, 2024-01-15).
    """
    if granularity not in GRANULARITIES:
        raise ValidationError(
            f"Unknown time range '{granularity}'. Use one of: {', '.join(GRANULARITIES)}",
            fields=['range']
        )
    now = now or datetime.now()

    if granularity == 'all':
        return ReportWindow(granularity=granularity, end=now)

    start = _step_back(now, granularity, 1)
    return ReportWindow(
        granularity=granularity,
        end=now,
        start=start,
        previous_start=_step_back(now, granularity, 2),
        previous_end=start
    )


def percent_change(current: Any, previous: Any) -> float:
    """
    Period-over-period change in percent.

    With no previous value the change is 100 when there is a current value
    and 0 otherwise.
    """
    current = Decimal(str(current))
    previous = Decimal(str(previous))
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return float((current - previous) / previous * 100)


def trend(change: float) -> str:
    return 'up' if change >= 0 else 'down'


def sum_totals(documents: Iterable[Document]) -> Decimal:
    return sum((doc.total for doc in documents), Decimal('0'))


@dataclass(frozen=True)
class StatCard:
    """One summary card: value, change in percent and its direction."""
    value: Any
    change: float
    trend: str
    baseline: Any = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'value': to_json_number(self.value) if isinstance(self.value, Decimal) else self.value,
            'change': round(self.change, 1),
            'trend': self.trend,
        }
        if self.baseline is not None:
            data['baseline'] = to_json_number(self.baseline) if isinstance(self.baseline, Decimal) else self.baseline
        return data


def _stat(value: Any, previous: Any, baseline: Any = None) -> StatCard:
    change = percent_change(value, previous)
    return StatCard(value=value, change=change, trend=trend(change), baseline=baseline)


@dataclass(frozen=True)
class TopProduct:
    product_id: int
    name: str
    units_sold: int
    revenue: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            'productId': self.product_id,
            'name': self.name,
            'unitsSold': self.units_sold,
            'revenue': to_json_number(self.revenue),
        }


def top_selling_products(sales: Iterable[Sale], limit: int = 5) -> List[TopProduct]:
    """
    Products ranked by units sold across the items of ``sales``.

    Ties keep the order in which products were first seen (stable sort).
    The name is the one on the first line seen for the product.
    """
    totals: Dict[int, Dict[str, Any]] = {}
    for sale in sales:
        for item in sale.items:
            entry = totals.setdefault(item.product_id, {'name': item.name, 'units': 0, 'revenue': Decimal('0')})
            entry['units'] += item.quantity
            entry['revenue'] += item.subtotal

    ranked = sorted(totals.items(), key=lambda pair: pair[1]['units'], reverse=True)
    return [
        TopProduct(product_id=product_id, name=entry['name'], units_sold=entry['units'], revenue=entry['revenue'])
        for product_id, entry in ranked[:limit]
    ]


def recent_documents(documents: Iterable[Document], limit: int = 5) -> List[Document]:
    """Newest first by ``date``; equal dates keep their stored order, undated go last."""
    return sorted(
        documents,
        key=lambda doc: parse_record_date(doc.date) or datetime.min,
        reverse=True
    )[:limit]


def export_rows(documents: Iterable[Document]) -> List[Dict[str, Any]]:
    """
    Row projection consumed by the PDF / spreadsheet / CSV exporters.

    Columns are fixed: reference, counterparty, date, items (line count),
    total, status.
    """
    return [
        {
            'reference': doc.reference,
            'counterparty': doc.counterparty,
            'date': doc.date,
            'items': doc.item_count,
            'total': to_json_number(doc.total),
            'status': doc.status,
        }
        for doc in documents
    ]


@dataclass(frozen=True)
class Report:
    """Read-only snapshot of the Reports view for one window."""
    window: ReportWindow
    sales: Tuple[Sale, ...]
    purchases: Tuple[Purchase, ...]
    total_sales: StatCard
    total_purchases: StatCard
    total_customers: StatCard
    total_products: StatCard
    top_products: Tuple[TopProduct, ...] = field(default_factory=tuple)
    recent_sales: Tuple[Sale, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'window': self.window.to_dict(),
            'stats': {
                'totalSales': self.total_sales.to_dict(),
                'totalPurchases': self.total_purchases.to_dict(),
                'totalCustomers': self.total_customers.to_dict(),
                'totalProducts': self.total_products.to_dict(),
            },
            'topProducts': [product.to_dict() for product in self.top_products],
            'recentSales': [sale.to_dict() for sale in self.recent_sales],
            'salesCount': len(self.sales),
            'purchasesCount': len(self.purchases),
        }


def build_report(
    sales: Sequence[Sale],
    purchases: Sequence[Purchase],
    customers: Sequence[Customer] = (),
    products: Sequence[Product] = (),
    granularity: str = 'month',
    now: Optional[datetime] = None,
    top_limit: int = 5,
    recent_limit: int = 5
) -> Report:
    """
    Aggregate sales and purchases for a time range.

    Sales and purchase totals are compared with the previous window of the
    same length ('all' has none, so its change is 0). Customers and products
    carry no dated history: their card compares the active / current count
    with the all-time count, which is reported as ``baseline``.
    """
    window = compute_window(granularity, now)

    current_sales = [sale for sale in sales if window.contains(sale.date)]
    current_purchases = [purchase for purchase in purchases if window.contains(purchase.date)]

    sales_total = sum_totals(current_sales)
    purchases_total = sum_totals(current_purchases)

    if window.has_previous:
        previous_sales_total = sum_totals(s for s in sales if window.contains_previous(s.date))
        previous_purchases_total = sum_totals(p for p in purchases if window.contains_previous(p.date))
        sales_card = _stat(sales_total, previous_sales_total)
        purchases_card = _stat(purchases_total, previous_purchases_total)
    else:
        sales_card = StatCard(value=sales_total, change=0.0, trend='up')
        purchases_card = StatCard(value=purchases_total, change=0.0, trend='up')

    active_customers = [customer for customer in customers if customer.is_active]

    return Report(
        window=window,
        sales=tuple(current_sales),
        purchases=tuple(current_purchases),
        total_sales=sales_card,
        total_purchases=purchases_card,
        total_customers=_stat(len(active_customers), len(customers), baseline=len(customers)),
        total_products=_stat(len(products), len(products), baseline=len(products)),
        top_products=tuple(top_selling_products(current_sales, top_limit)),
        recent_sales=tuple(recent_documents(current_sales, recent_limit))
    )


def generate_report(granularity: str = 'month', now: Optional[datetime] = None) -> Report:
    """Build the report from the record stores of the current app."""
    from flask import current_app
    from inventory_dashboard.services.ledger_service import load_documents
    from inventory_dashboard.services.record_service import list_records

    report = build_report(
        sales=load_documents('sales'),
        purchases=load_documents('purchases'),
        customers=list_records('customers'),
        products=list_records('products'),
        granularity=granularity,
        now=now,
        top_limit=current_app.config.get('REPORT_TOP_LIMIT', 5),
        recent_limit=current_app.config.get('REPORT_RECENT_LIMIT', 5)
    )
    logger.debug(f"Report {granularity}: {len(report.sales)} sales, {len(report.purchases)} purchases")
    return report


def generate_export(kind: str, granularity: str = 'month', now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Export projection of the documents inside the window.

    Returns:
        dict with keys:
            - columns: fixed column keys
            - headers: display labels for ``kind``
            - rows: list of row dicts
    """
    from inventory_dashboard.services.ledger_service import document_type_for, load_documents

    document_type_for(kind)
    window = compute_window(granularity, now)
    documents = [doc for doc in load_documents(kind) if window.contains(doc.date)]
    return {
        'kind': kind,
        'window': window.to_dict(),
        'columns': list(EXPORT_COLUMNS),
        'headers': list(EXPORT_HEADERS[kind]),
        'rows': export_rows(documents),
    }
