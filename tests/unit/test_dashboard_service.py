"""
Unit tests for the dashboard summary and chart.
"""

from inventory_dashboard.services.dashboard_service import get_dashboard, monthly_series


class TestMonthlySeries:
    """Tests for the monthly chart series."""

    def test_same_month_of_different_years_stays_apart(self, make_sale):
        sales = [make_sale('2024-03-01', total=10), make_sale('2023-03-20', total=5), make_sale('2024-03-09', total=1)]

        assert monthly_series(sales, []) == [
            {'month': '2023-03', 'sales': 5, 'purchases': 0},
            {'month': '2024-03', 'sales': 11, 'purchases': 0},
        ]

    def test_chronological_order_across_kinds(self, make_sale):
        from inventory_dashboard.services.ledger_service import new_document

        purchase = new_document('purchases', counterparty='Office Depot', date='2023-12-05')
        purchase.total = 40
        series = monthly_series([make_sale('2024-01-10', total=2.5)], [purchase])

        assert [point['month'] for point in series] == ['2023-12', '2024-01']
        assert series[0] == {'month': '2023-12', 'sales': 0, 'purchases': 40}
        assert series[1]['sales'] == 2.5

    def test_undated_documents_are_skipped(self, make_sale):
        assert monthly_series([make_sale('', total=3)], []) == []


class TestDashboard:
    """Tests for the dashboard snapshot over seeded data."""

    def test_seeded_totals(self, app_context):
        data = get_dashboard()

        assert data['totalProducts'] == 5
        assert data['totalCustomers'] == 3
        assert data['totalSales'] == 2049.93
        assert data['totalPurchases'] == 4399.83
        assert data['chart'] == [{'month': '2024-03', 'sales': 2049.93, 'purchases': 4399.83}]
