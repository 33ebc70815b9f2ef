"""
Settings Service - the application settings document.

Settings are kept as a single-element collection named ``appSettings``.
Persisted values are merged over ``DEFAULT_SETTINGS`` on every read, so a
key added to the defaults shows up without rewriting stored settings.
"""
import copy
import logging
from typing import Any, Dict, Mapping

from inventory_dashboard.exceptions import ValidationError
from inventory_dashboard.record_store import get_store

logger = logging.getLogger(__name__)

SETTINGS_COLLECTION = 'appSettings'

DEFAULT_SETTINGS: Dict[str, Dict[str, Any]] = {
    'notifications': {
        'emailNotifications': True,
        'lowStockAlerts': True,
        'salesReports': True,
        'purchaseReports': True,
    },
    'security': {
        'twoFactorAuth': False,
        'sessionTimeout': '30',
        'passwordExpiry': '90',
    },
    'business': {
        'companyName': 'My Company',
        'address': '123 Business St, City, Country',
        'phone': '+1 234-567-8900',
        'email': 'contact@mycompany.com',
        'currency': 'USD',
        'timezone': 'UTC',
    },
    'appearance': {
        'darkMode': False,
        'compactMode': False,
        'fontSize': 'medium',
    },
}


def merge_settings(stored: Mapping[str, Any]) -> Dict[str, Dict[str, Any]]:
    """Defaults overlaid with the known section/key pairs of ``stored``."""
    settings = copy.deepcopy(DEFAULT_SETTINGS)
    for section, values in (stored or {}).items():
        if section not in settings or not isinstance(values, Mapping):
            continue
        for key, value in values.items():
            if key in settings[section]:
                settings[section][key] = value
    return settings


def validate_changes(changes: Mapping[str, Any]) -> None:
    """Reject sections or keys that are not part of the settings document."""
    unknown = []
    for section, values in changes.items():
        if section not in DEFAULT_SETTINGS:
            unknown.append(section)
            continue
        if not isinstance(values, Mapping):
            raise ValidationError(f"Settings section '{section}' must be an object", fields=[section])
        unknown.extend(f"{section}.{key}" for key in values if key not in DEFAULT_SETTINGS[section])

    if unknown:
        raise ValidationError(f"Unknown settings: {', '.join(unknown)}", fields=unknown)


def get_settings() -> Dict[str, Dict[str, Any]]:
    rows = get_store(SETTINGS_COLLECTION).load()
    return merge_settings(rows[0] if rows else {})


def update_settings(changes: Mapping[str, Any]) -> Dict[str, Dict[str, Any]]:
    """
    Apply a partial update, e.g. ``{'appearance': {'darkMode': True}}``.

    Sections and keys not given keep their current value. Nothing is
    written when any section or key is unknown.
    """
    validate_changes(changes)

    settings = get_settings()
    for section, values in changes.items():
        settings[section].update(values)

    get_store(SETTINGS_COLLECTION).save([settings])
    logger.info(f"Settings updated: {', '.join(sorted(changes)) or 'no sections'}")
    return settings
