"""Listing service - search box filtering and table pagination."""
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from inventory_dashboard.utils.number_format import number_text


def _field_text(record: Any, field: str) -> str:
    if isinstance(record, Mapping):
        value = record.get(field)
    else:
        value = getattr(record, field, None)

    if value is None:
        return ''
    if isinstance(value, str):
        return value
    return number_text(value)


def filter_records(records: Iterable[Any], query: str, fields: Sequence[str]) -> List[Any]:
    """
    Records where the query is a case-insensitive substring of at least one field.

    Works on record objects (attribute names) and plain mappings (keys).
    Numbers are matched through their plain string form, so "500" finds an
    amount of 500.00. The query is not trimmed, so "laptop " only
    matches text with a trailing space. An empty query keeps every record,
    in order.
    """
    records = list(records)
    needle = (query or '').lower()
    if not needle:
        return records

    return [
        record for record in records
        if any(needle in _field_text(record, field).lower() for field in fields)
    ]


def paginate(records: Sequence[Any], page: int, page_size: int) -> List[Any]:
    """
    Slice ``records[page*size : page*size+size]``.

    Pages are zero-based. A page past the end, a negative page or a
    non-positive size gives an empty list instead of an error.
    """
    if page < 0 or page_size <= 0:
        return []
    start = page * page_size
    return list(records[start:start + page_size])


def list_page(
    records: Iterable[Any],
    query: str = '',
    fields: Sequence[str] = (),
    page: int = 0,
    page_size: int = 5
) -> Dict[str, Any]:
    """
    Filter then paginate, as a table with a search box shows it.

    Returns:
        dict with keys:
            - items: records on the requested page
            - count: number of records matching the query
            - page, page_size: echo of the request
    """
    matched = filter_records(records, query, fields)
    return {
        'items': paginate(matched, page, page_size),
        'count': len(matched),
        'page': page,
        'page_size': page_size,
    }
