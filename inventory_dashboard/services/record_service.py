"""Record service - CRUD over flat record collections."""
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from inventory_dashboard.exceptions import NotFoundError
from inventory_dashboard.models import Record, get_record_type
from inventory_dashboard.record_store import get_store

logger = logging.getLogger(__name__)


def next_id(records: Iterable[Any]) -> int:
    """
    Id for a new record: highest existing id + 1, or 1 for an empty collection.

    Ids are not renumbered after deletions, so ``[1, 3]`` gives 4.
    Accepts record objects or raw mappings.
    """
    ids = []
    for record in records:
        value = record.get('id') if isinstance(record, Mapping) else getattr(record, 'id', None)
        if isinstance(value, int) and not isinstance(value, bool):
            ids.append(value)
    return max(ids) + 1 if ids else 1


def record_type_for(collection: str):
    """Resolve a collection name or raise NotFoundError."""
    record_cls = get_record_type(collection)
    if record_cls is None:
        raise NotFoundError(f"Unknown collection '{collection}'")
    return record_cls


def list_records(collection: str) -> List[Record]:
    record_cls = record_type_for(collection)
    return [record_cls.from_dict(data) for data in get_store(collection).load()]


def get_record(collection: str, record_id: int) -> Record:
    for record in list_records(collection):
        if record.id == record_id:
            return record
    raise NotFoundError(f"No record {record_id} in {collection}")


def create_record(collection: str, data: Mapping[str, Any]) -> Record:
    """
    Validate and append a new record.

    ``id`` in the payload is ignored; the store assigns it. Nothing is
    persisted when validation fails.
    """
    record_cls = record_type_for(collection)
    record = record_cls()
    record.apply_changes({key: value for key, value in data.items() if key != 'id'})
    record.validate()

    store = get_store(collection)
    rows = store.load()
    record.id = next_id(rows)
    rows.append(record.to_dict())
    store.save(rows)

    logger.info(f"Created {collection} #{record.id}")
    return record


def update_record(collection: str, record_id: int, changes: Mapping[str, Any]) -> Record:
    """Apply allowed field changes to one record and rewrite the collection."""
    record_cls = record_type_for(collection)
    store = get_store(collection)
    rows = store.load()

    for index, row in enumerate(rows):
        if row.get('id') == record_id:
            record = record_cls.from_dict(row)
            record.apply_changes({key: value for key, value in changes.items() if key != 'id'})
            record.validate()
            rows[index] = record.to_dict()
            store.save(rows)
            logger.info(f"Updated {collection} #{record_id}")
            return record

    raise NotFoundError(f"No record {record_id} in {collection}")


def delete_record(collection: str, record_id: int) -> bool:
    """Remove a record. Returns False when it did not exist (nothing is written)."""
    record_type_for(collection)
    store = get_store(collection)
    rows = store.load()
    remaining = [row for row in rows if row.get('id') != record_id]

    if len(remaining) == len(rows):
        return False

    store.save(remaining)
    logger.info(f"Deleted {collection} #{record_id}")
    return True


def find_by_id(records: Iterable[Any], record_id: int) -> Optional[Any]:
    for record in records:
        value = record.get('id') if isinstance(record, Mapping) else getattr(record, 'id', None)
        if value == record_id:
            return record
    return None


def records_as_dicts(records: Iterable[Record]) -> List[Dict[str, Any]]:
    return [record.to_dict() for record in records]
