"""
TypeScript code generator module.

Generates TypeScript typings for PocketBase records.
"""

from .generator import TypeScriptGenerator, create_typescript_generator
from .naming import record_type_name, sanitize_field_name
from .types import TYPESCRIPT_TYPE_RULES, TypeScriptTypeMapper

__all__ = [
    "TypeScriptGenerator",
    "TypeScriptTypeMapper",
    "TYPESCRIPT_TYPE_RULES",
    "create_typescript_generator",
    "record_type_name",
    "sanitize_field_name",
]
