"""
TypeScript type system for code generation.

Maps PocketBase field declarations to TypeScript type expressions.
"""

from typing import Any, Callable, Dict, Mapping, Optional, Union

from ...core.generator import UnknownFieldTypeError
from ...core.schema import Field, FieldType
from .naming import sanitize_field_name

# A rendering rule is a fixed expression or a function of the field options
TypeRule = Union[str, Callable[[Dict[str, Any]], str]]


def render_select(options: Dict[str, Any]) -> str:
    """Union of the select's literal values, or ``string`` when none are set."""
    values = options.get("values")
    if not values:
        return "string"
    return " | ".join(f'"{value}"' for value in values)


def render_file(options: Dict[str, Any]) -> str:
    """``string[]`` for multi-file fields, ``string`` otherwise."""
    max_select = options.get("maxSelect")
    if isinstance(max_select, (int, float)) and max_select > 1:
        return "string[]"
    return "string"


TYPESCRIPT_TYPE_RULES: Dict[FieldType, TypeRule] = {
    FieldType.TEXT: "string",
    FieldType.NUMBER: "number",
    FieldType.BOOL: "boolean",
    FieldType.EMAIL: "string",
    FieldType.URL: "string",
    FieldType.DATE: "string",
    FieldType.SELECT: render_select,
    FieldType.JSON: "null | unknown",
    FieldType.FILE: render_file,
    FieldType.RELATION: "string",
    FieldType.USER: "string",
}

_missing = set(FieldType) - set(TYPESCRIPT_TYPE_RULES)
if _missing:
    raise RuntimeError(
        "No TypeScript rule for field types: "
        + ", ".join(sorted(t.value for t in _missing))
    )


class TypeScriptTypeMapper:
    """
    Maps schema fields to TypeScript types and member declarations.

    ``type_overrides`` maps a declared type name to a fixed expression and
    is consulted before the built-in rules, so it can also cover field types
    PocketBase added later.
    """

    def __init__(self, type_overrides: Optional[Mapping[str, str]] = None):
        """Initialize with optional per-type overrides."""
        self.type_overrides = dict(type_overrides or {})

    def map_field_type(self, field: Field) -> str:
        """
        Map a field to a TypeScript type expression.

        Args:
            field: The field to map

        Returns:
            Type expression, e.g. ``string`` or ``"a" | "b"``

        Raises:
            UnknownFieldTypeError: If the declared type has no rule
        """
        if field.type in self.type_overrides:
            return self.type_overrides[field.type]

        field_type = field.field_type
        if field_type is None:
            raise UnknownFieldTypeError(field.type, field.name)

        rule = TYPESCRIPT_TYPE_RULES[field_type]
        if callable(rule):
            return rule(field.options or {})
        return rule

    def render_member(self, field: Field) -> str:
        """
        Render the member line for a field, including the line terminator.

        Optional fields (``required`` false) get a ``?`` marker.
        """
        name = sanitize_field_name(field.name)
        marker = "" if field.required else "?"
        return f"{name}{marker}: {self.map_field_type(field)}\n"
