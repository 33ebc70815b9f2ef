"""
Unit tests for sale / purchase drafts.
"""

import pytest
from decimal import Decimal

from inventory_dashboard.exceptions import NotFoundError, ValidationError
from inventory_dashboard.services import draft_service
from inventory_dashboard.services.ledger_service import load_documents


class TestDraft:
    """Tests for building a document across requests."""

    def test_fresh_draft_has_next_reference(self, app_context):
        draft = draft_service.get_draft('sales')

        assert draft.reference == 'INV004'
        assert draft.items == []
        assert draft.total == Decimal('0')

    def test_add_items_is_persisted(self, app_context):
        draft_service.add_to_draft('sales', 1, 1)
        draft_service.add_to_draft('sales', '1', 1)
        draft_service.add_to_draft('sales', 5, 2)
        draft = draft_service.get_draft('sales')

        assert [(item.product_id, item.quantity) for item in draft.items] == [(1, 2), (5, 2)]
        assert draft.total == Decimal('2099.96')

    def test_unknown_product_leaves_draft_unchanged(self, app_context):
        draft_service.add_to_draft('purchases', 3, 1)
        draft = draft_service.add_to_draft('purchases', 99, 1)

        assert [item.product_id for item in draft.items] == [3]

    def test_remove_item(self, app_context):
        draft_service.add_to_draft('sales', 1, 1)
        draft_service.add_to_draft('sales', 2, 1)
        draft = draft_service.remove_from_draft('sales', 1)

        assert [item.product_id for item in draft.items] == [2]
        assert draft.total == Decimal('699.99')

    def test_drafts_are_per_kind(self, app_context):
        draft_service.add_to_draft('sales', 1, 1)

        assert draft_service.get_draft('purchases').items == []
        assert draft_service.get_draft('purchases').reference == 'PO004'

    def test_header_update(self, app_context):
        draft = draft_service.update_draft_header('purchases', {'counterparty': ' Office Depot ', 'status': 'Received'})

        assert draft.counterparty == 'Office Depot'
        assert draft_service.get_draft('purchases').status == 'Received'

    def test_header_rejects_unknown_status_and_fields(self, app_context):
        with pytest.raises(ValidationError):
            draft_service.update_draft_header('sales', {'status': 'Received'})
        with pytest.raises(ValidationError):
            draft_service.update_draft_header('sales', {'total': 5})

    def test_commit(self, app_context):
        draft_service.update_draft_header('sales', {'counterparty': 'Jane Smith', 'date': '2024-03-16'})
        draft_service.add_to_draft('sales', 4, 2)
        sale = draft_service.commit_draft('sales')

        assert sale.id == 4
        assert sale.reference == 'INV004'
        assert sale.total == Decimal('599.98')
        assert len(load_documents('sales')) == 4
        assert draft_service.get_draft('sales').reference == 'INV005'

    def test_failed_commit_keeps_draft(self, app_context):
        draft_service.add_to_draft('sales', 4, 1)

        with pytest.raises(ValidationError):
            draft_service.commit_draft('sales')

        assert len(draft_service.get_draft('sales').items) == 1
        assert len(load_documents('sales')) == 3

    def test_clear(self, app_context):
        draft_service.add_to_draft('sales', 4, 1)
        draft_service.clear_draft('sales')

        assert draft_service.get_draft('sales').items == []

    def test_unknown_kind(self, app_context):
        with pytest.raises(NotFoundError):
            draft_service.get_draft('invoices')
