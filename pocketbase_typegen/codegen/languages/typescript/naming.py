"""
TypeScript-specific naming utilities.
"""

import re

from ...core.naming import to_pascal_case

# A member name starting like a numeric literal must be quoted
_NUMERIC_START = re.compile(r"[0-9]")


def sanitize_field_name(name: str) -> str:
    """Quote a field name that would start with a digit."""
    if _NUMERIC_START.match(name):
        return f'"{name}"'
    return name


def record_type_name(collection_name: str, suffix: str = "Record") -> str:
    """Name of the record type generated for a collection."""
    return f"{to_pascal_case(collection_name)}{suffix}"
