"""
hemp type system.

Key casing strategies and the record protocol presenters rely on.
"""

from hemp.core.types.casing import Casing, camel_case, snake_case, studly_case
from hemp.core.types.records import FieldedRecord, json_default, read_field, record_fields

__all__ = [
    # Casing
    "Casing",
    "snake_case",
    "camel_case",
    "studly_case",
    # Records
    "FieldedRecord",
    "record_fields",
    "read_field",
    "json_default",
]
