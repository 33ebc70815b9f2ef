"""
Unit tests for record CRUD and id assignment.
"""

import pytest
from decimal import Decimal

from inventory_dashboard.exceptions import NotFoundError, ValidationError
from inventory_dashboard.services.record_service import (
    create_record, delete_record, get_record, list_records, next_id, update_record
)


class TestNextId:
    """Tests for id assignment."""

    def test_gaps_are_kept(self):
        assert next_id([{'id': 1}, {'id': 3}]) == 4

    def test_empty_collection(self):
        assert next_id([]) == 1

    def test_unordered_ids(self):
        assert next_id([{'id': 5}, {'id': 2}]) == 6


class TestRecordCrud:
    """Tests for create / update / delete through the record store."""

    def test_list_seeded_products(self, app_context):
        products = list_records('products')

        assert [p.id for p in products] == [1, 2, 3, 4, 5]
        assert products[0].price == Decimal('999.99')

    def test_create_assigns_id_and_ignores_payload_id(self, app_context):
        product = create_record('products', {
            'id': 1, 'name': 'Mouse', 'category': 'Accessories', 'price': 19.99, 'stock': 30, 'sku': 'MS001'
        })

        assert product.id == 6
        assert get_record('products', 6).name == 'Mouse'
        assert get_record('products', 1).name == 'Laptop'

    def test_create_after_delete_keeps_gap(self, app_context):
        delete_record('expenses', 3)
        expense = create_record('expenses', {'date': '2024-03-16', 'category': 'Travel', 'amount': 80})

        assert expense.id == 6
        assert [e.id for e in list_records('expenses')] == [1, 2, 4, 5, 6]

    def test_create_with_missing_fields_persists_nothing(self, app_context):
        with pytest.raises(ValidationError) as exc:
            create_record('customers', {'name': 'No Contact'})

        assert exc.value.fields == ['email', 'phone']
        assert len(list_records('customers')) == 3

    def test_sales_return_amounts(self, app_context):
        with pytest.raises(ValidationError) as exc:
            create_record('salesReturns', {
                'productName': 'Apple', 'date': '2024-03-16', 'customer': 'Thomas', 'status': 'Pending',
                'grandTotal': 0, 'paid': -1, 'due': 0, 'paymentStatus': 'Unpaid'
            })

        assert exc.value.fields == ['grandTotal', 'paid']

    def test_update_fields(self, app_context):
        supplier = update_record('suppliers', 2, {'contactPerson': 'Ann Lee', 'status': 'Inactive'})

        assert supplier.contact_person == 'Ann Lee'
        assert get_record('suppliers', 2).status == 'Inactive'

    def test_update_rejects_unknown_fields(self, app_context):
        with pytest.raises(ValidationError) as exc:
            update_record('products', 1, {'color': 'red'})

        assert exc.value.fields == ['color']
        assert get_record('products', 1).to_dict() == list_records('products')[0].to_dict()

    def test_update_cannot_clear_required_field(self, app_context):
        with pytest.raises(ValidationError):
            update_record('stores', 1, {'email': ''})

        assert get_record('stores', 1).email == 'store1@example.com'

    def test_update_missing_record(self, app_context):
        with pytest.raises(NotFoundError):
            update_record('products', 99, {'name': 'Ghost'})

    def test_delete(self, app_context):
        assert delete_record('transfers', 2) is True
        assert delete_record('transfers', 2) is False
        assert [t.id for t in list_records('transfers')] == [1, 3]

    def test_unknown_collection(self, app_context):
        with pytest.raises(NotFoundError):
            list_records('widgets')
