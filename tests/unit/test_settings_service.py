"""
Unit tests for application settings.
"""

import pytest

from inventory_dashboard.exceptions import ValidationError
from inventory_dashboard.services.settings_service import (
    DEFAULT_SETTINGS, get_settings, merge_settings, update_settings
)


class TestSettings:
    """Tests for reading and updating settings."""

    def test_defaults_when_nothing_saved(self, app_context):
        assert get_settings() == DEFAULT_SETTINGS

    def test_partial_update_is_persisted(self, app_context):
        update_settings({'appearance': {'darkMode': True}, 'business': {'currency': 'EUR'}})
        settings = get_settings()

        assert settings['appearance']['darkMode'] is True
        assert settings['appearance']['fontSize'] == 'medium'
        assert settings['business']['currency'] == 'EUR'
        assert settings['security'] == DEFAULT_SETTINGS['security']

    def test_unknown_keys_are_rejected(self, app_context):
        with pytest.raises(ValidationError) as exc:
            update_settings({'appearance': {'theme': 'blue'}, 'billing': {}})

        assert exc.value.fields == ['appearance.theme', 'billing']
        assert get_settings() == DEFAULT_SETTINGS

    def test_section_must_be_object(self, app_context):
        with pytest.raises(ValidationError):
            update_settings({'security': 'off'})

    def test_merge_ignores_stale_keys(self):
        merged = merge_settings({'notifications': {'lowStockAlerts': False, 'fax': True}, 'legacy': {}})

        assert merged['notifications']['lowStockAlerts'] is False
        assert 'fax' not in merged['notifications']
        assert 'legacy' not in merged

    def test_defaults_are_not_mutated(self, app_context):
        update_settings({'security': {'twoFactorAuth': True}})

        assert DEFAULT_SETTINGS['security']['twoFactorAuth'] is False
