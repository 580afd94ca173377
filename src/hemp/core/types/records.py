"""
Record protocols and field extraction.

A presenter can wrap anything that exposes a flat field map. This module
defines that capability and the single function used to read it, so the
presenter never needs to know which kind of record it is holding.
"""

from __future__ import annotations

import dataclasses
import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Protocol, runtime_checkable

from pydantic import BaseModel


@runtime_checkable
class FieldedRecord(Protocol):
    """
    Protocol for records that export their own flat field map.

    Presenters, presented attribute views and pydantic-based models in user
    code all satisfy it.
    """

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a dictionary representation.

        Returns:
            Dict[str, Any]: Field name to value mapping, in field order
        """
        ...


def record_fields(record: Any) -> Dict[str, Any]:
    """
    Return the flat field map of ``record`` as a new ordered dict.

    Lookup order:
        1. ``Mapping`` instances are copied as-is
        2. pydantic models are dumped with ``model_dump()``
        3. objects satisfying :class:`FieldedRecord` use ``to_dict()``
        4. dataclass instances export their fields (not recursively)
        5. other objects export their public instance attributes

    Args:
        record: The wrapped record

    Returns:
        Dict mapping field names to values

    Raises:
        TypeError: If the record exposes no field map at all
    """
    if isinstance(record, Mapping):
        return dict(record)
    if isinstance(record, BaseModel):
        return record.model_dump()
    if isinstance(record, FieldedRecord):
        return dict(record.to_dict())
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return {
            field.name: getattr(record, field.name)
            for field in dataclasses.fields(record)
        }
    try:
        attributes = vars(record)
    except TypeError as exc:
        raise TypeError(
            f"Cannot read fields from {type(record).__name__}; expected a mapping, "
            "a pydantic model, a dataclass or an object with to_dict()"
        ) from exc
    return {name: value for name, value in attributes.items() if not name.startswith("_")}


def json_default(value: Any) -> Any:
    """
    ``default`` hook for :func:`json.dumps` over presented output.

    Nested records are encoded through their field map, temporal values as
    ISO-8601 strings and plain enums by value.

    Raises:
        TypeError: If ``value`` has no JSON representation
    """
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, FieldedRecord):
        return value.to_dict()
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return record_fields(value)
    if isinstance(value, (set, frozenset)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def read_field(record: Any, name: str) -> Any:
    """
    Read a single field from ``record``.

    Mappings are read by key first so that a field named like a mapping
    method (``items``, ``keys``) yields the field. Everything else, methods
    included, is read by attribute.

    Raises:
        AttributeError: If the record has no such key or attribute
    """
    if isinstance(record, Mapping) and name in record:
        return record[name]
    return getattr(record, name)


__all__ = ["FieldedRecord", "record_fields", "read_field", "json_default"]
