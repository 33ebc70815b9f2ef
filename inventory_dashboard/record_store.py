"""
Record stores: one JSON array per named collection.

Every collection is read and rewritten as a whole (last-writer-wins).
Back ends are interchangeable per environment:

- memory: process-local dict, used by tests
- json:   one ``<collection>.json`` file per collection under DATA_DIR
- sql:    one row per collection in ``record_collection`` (SQLAlchemy)

Usage:
    store = get_store('products')
    products = store.load()
    products.append({...})
    store.save(products)
"""
import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from flask import Flask, current_app
from sqlalchemy.exc import SQLAlchemyError

from inventory_dashboard.exceptions import StorageError
from inventory_dashboard.utils.number_format import to_json_number

logger = logging.getLogger(__name__)

SeedFactory = Callable[[], List[Dict[str, Any]]]

BACKENDS = ('memory', 'json', 'sql')


def _serialize(records: List[Dict[str, Any]]) -> str:
    """Serialize a collection to JSON, writing Decimals as plain numbers."""
    def default_handler(obj: Any) -> Any:
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        elif isinstance(obj, Decimal):
            return to_json_number(obj)
        raise TypeError(f"Object of type {type(obj)} is not JSON serializable")
    return json.dumps(records, default=default_handler)


def _deserialize(payload: str) -> List[Dict[str, Any]]:
    records = json.loads(payload)
    if not isinstance(records, list):
        raise ValueError(f"expected a JSON array, got {type(records).__name__}")
    return records


class RecordStore(ABC):
    """
    Load/save contract for one named collection.

    ``load`` returns the persisted records; when nothing has been persisted
    yet and a seed factory is configured, the seed set is materialized,
    saved and returned. ``save`` replaces the entire collection.
    """

    def __init__(self, name: str, seed_factory: Optional[SeedFactory] = None):
        self.name = name
        self._seed_factory = seed_factory

    def load(self) -> List[Dict[str, Any]]:
        try:
            payload = self._read()
            if payload is not None:
                return _deserialize(payload)
        except (OSError, ValueError, SQLAlchemyError) as e:
            logger.error(f"[STORE] ✗ Load error for '{self.name}': {e}", exc_info=True)
            raise StorageError(self.name, str(e))

        if self._seed_factory is None:
            return []

        records = self._seed_factory()
        logger.info(f"[STORE] Seeding '{self.name}' with {len(records)} records")
        self.save(records)
        return records

    def save(self, records: List[Dict[str, Any]]) -> None:
        try:
            payload = _serialize(list(records))
            self._write(payload)
        except (OSError, TypeError, ValueError, SQLAlchemyError) as e:
            logger.error(f"[STORE] ✗ Save error for '{self.name}': {e}", exc_info=True)
            raise StorageError(self.name, str(e))
        logger.debug(f"[STORE] Saved '{self.name}' ({len(records)} records)")

    def exists(self) -> bool:
        """True when the collection has been persisted at least once."""
        try:
            return self._read() is not None
        except (OSError, SQLAlchemyError) as e:
            raise StorageError(self.name, str(e))

    @abstractmethod
    def clear(self) -> None:
        """Forget the persisted collection; the next load seeds again."""

    @abstractmethod
    def _read(self) -> Optional[str]:
        """Return the raw JSON payload, or None when never persisted."""

    @abstractmethod
    def _write(self, payload: str) -> None:
        """Replace the raw JSON payload."""


class MemoryRecordStore(RecordStore):
    """Store backed by a dict shared across the registry (payloads kept as JSON text)."""

    def __init__(self, name: str, backing: Dict[str, str], seed_factory: Optional[SeedFactory] = None):
        super().__init__(name, seed_factory)
        self._backing = backing

    def _read(self) -> Optional[str]:
        return self._backing.get(self.name)

    def _write(self, payload: str) -> None:
        self._backing[self.name] = payload

    def clear(self) -> None:
        self._backing.pop(self.name, None)


class JsonFileRecordStore(RecordStore):
    """Store backed by ``<data_dir>/<name>.json``; writes go through a temp file and rename."""

    def __init__(self, name: str, data_dir: Path, seed_factory: Optional[SeedFactory] = None):
        super().__init__(name, seed_factory)
        self.path = Path(data_dir) / f"{name}.json"

    def _read(self) -> Optional[str]:
        if not self.path.exists():
            return None
        return self.path.read_text(encoding='utf-8')

    def _write(self, payload: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.name}.", suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as fh:
                fh.write(payload)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()


class SqlRecordStore(RecordStore):
    """Store backed by one ``record_collection`` row; each save is one transaction."""

    def __init__(self, name: str, session_factory, seed_factory: Optional[SeedFactory] = None):
        super().__init__(name, seed_factory)
        self._session_factory = session_factory

    def _read(self) -> Optional[str]:
        from inventory_dashboard.models.collection_blob import CollectionBlob

        session = self._session_factory()
        blob = session.get(CollectionBlob, self.name)
        return blob.payload if blob else None

    def _write(self, payload: str) -> None:
        from inventory_dashboard.models.collection_blob import CollectionBlob

        session = self._session_factory()
        try:
            blob = session.get(CollectionBlob, self.name)
            if blob is None:
                session.add(CollectionBlob(name=self.name, payload=payload))
            else:
                blob.payload = payload
            session.commit()
        except SQLAlchemyError:
            session.rollback()
            raise

    def clear(self) -> None:
        from inventory_dashboard.models.collection_blob import CollectionBlob

        session = self._session_factory()
        try:
            session.query(CollectionBlob).filter(CollectionBlob.name == self.name).delete()
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(self.name, str(e))


class RecordStoreRegistry:
    """
    Hands out one RecordStore per collection name for a configured back end.

    Seed factories are looked up by collection name; pass ``seed=False`` to
    start every collection empty.
    """

    def __init__(
        self,
        backend: str = 'memory',
        data_dir: Optional[str] = None,
        session_factory=None,
        seed: bool = True,
        seed_factories: Optional[Dict[str, SeedFactory]] = None
    ):
        if backend not in BACKENDS:
            raise ValueError(f"Unknown record store backend '{backend}'. Use one of: {', '.join(BACKENDS)}")
        if backend == 'json' and not data_dir:
            raise ValueError("The json record store backend requires DATA_DIR")
        if backend == 'sql' and session_factory is None:
            raise ValueError("The sql record store backend requires a database session")

        self.backend = backend
        self.data_dir = Path(data_dir) if data_dir else None
        self.seed = seed
        self._session_factory = session_factory
        self._seed_factories = seed_factories or {}
        self._memory: Dict[str, str] = {}
        self._stores: Dict[str, RecordStore] = {}

    def get(self, name: str) -> RecordStore:
        if name not in self._stores:
            self._stores[name] = self._build(name)
        return self._stores[name]

    def _build(self, name: str) -> RecordStore:
        seed_factory = self._seed_factories.get(name) if self.seed else None
        if self.backend == 'json':
            return JsonFileRecordStore(name, self.data_dir, seed_factory)
        if self.backend == 'sql':
            return SqlRecordStore(name, self._session_factory, seed_factory)
        return MemoryRecordStore(name, self._memory, seed_factory)


def init_record_stores(app: Flask) -> RecordStoreRegistry:
    """Build the record store registry from app config and attach it to the app."""
    from inventory_dashboard.seed_data import SEED_FACTORIES

    backend = app.config.get('RECORD_STORE_BACKEND', 'json')
    session_factory = None
    if backend == 'sql':
        from inventory_dashboard.database import init_db, get_session
        init_db(app)
        session_factory = get_session()

    registry = RecordStoreRegistry(
        backend=backend,
        data_dir=app.config.get('DATA_DIR'),
        session_factory=session_factory,
        seed=app.config.get('SEED_MOCK_DATA', True),
        seed_factories=SEED_FACTORIES
    )
    if not hasattr(app, 'extensions'):
        app.extensions = {}
    app.extensions['record_stores'] = registry
    app.logger.info(f"[STORE] Record store backend: {backend}")
    return registry


def get_registry() -> RecordStoreRegistry:
    """Get the record store registry of the current app."""
    registry = current_app.extensions.get('record_stores')
    if registry is None:
        raise RuntimeError("Record stores not initialized.")
    return registry


def get_store(name: str) -> RecordStore:
    """Get the record store for a collection of the current app."""
    return get_registry().get(name)
