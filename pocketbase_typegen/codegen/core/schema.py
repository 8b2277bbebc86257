"""
Core schema representation for code generation.

Converts PocketBase collection exports into a normalized internal format
that generators can work with consistently.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from enum import Enum


class SchemaError(ValueError):
    """Raised when raw collection data cannot be converted."""

    pass


class FieldType(Enum):
    """Field types supported by the PocketBase schema."""

    TEXT = "text"
    NUMBER = "number"
    BOOL = "bool"
    EMAIL = "email"
    URL = "url"
    DATE = "date"
    SELECT = "select"
    JSON = "json"
    FILE = "file"
    RELATION = "relation"
    USER = "user"

    @classmethod
    def lookup(cls, value: str) -> Optional["FieldType"]:
        """Return the member for a declared type name, or None."""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass
class Field:
    """A single field of a collection."""

    name: str
    type: str  # Declared type as received; checked when rendering
    required: bool = False
    options: Dict[str, Any] = field(default_factory=dict)

    # PocketBase attributes carried through unchanged
    id: Optional[str] = None
    system: Optional[bool] = None
    unique: Optional[bool] = None

    @property
    def field_type(self) -> Optional[FieldType]:
        """The declared type as a FieldType, or None if unsupported."""
        return FieldType.lookup(self.type)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the PocketBase JSON shape."""
        data: Dict[str, Any] = {}
        if self.id is not None:
            data["id"] = self.id
        if self.system is not None:
            data["system"] = self.system
        data["name"] = self.name
        data["type"] = self.type
        data["required"] = self.required
        if self.unique is not None:
            data["unique"] = self.unique
        data["options"] = dict(self.options)
        return data


@dataclass
class Collection:
    """A named collection and its ordered fields."""

    name: str
    fields: List[Field] = field(default_factory=list)
    id: Optional[str] = None
    type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the PocketBase JSON shape (fields under ``schema``)."""
        data: Dict[str, Any] = {}
        if self.id is not None:
            data["id"] = self.id
        data["name"] = self.name
        if self.type is not None:
            data["type"] = self.type
        data["schema"] = [f.to_dict() for f in self.fields]
        return data


def convert_field(raw: Dict[str, Any]) -> Field:
    """
    Convert one raw field dict to a Field.

    Args:
        raw: Field object as found in a collection's ``schema`` list

    Returns:
        Field instance

    Raises:
        SchemaError: If the entry is not an object or lacks name/type
    """
    if not isinstance(raw, dict):
        raise SchemaError(f"Expected field object, got {type(raw).__name__}")

    for key in ("name", "type"):
        if key not in raw:
            raise SchemaError(f"Field is missing '{key}': {raw!r}")

    options = raw.get("options")
    return Field(
        name=str(raw["name"]),
        type=str(raw["type"]),
        required=bool(raw.get("required", False)),
        options=dict(options) if isinstance(options, dict) else {},
        id=raw.get("id"),
        system=raw.get("system"),
        unique=raw.get("unique"),
    )


def convert_collections(raw_collections: List[Dict[str, Any]]) -> List[Collection]:
    """
    Convert PocketBase collection dicts to the internal schema model.

    Args:
        raw_collections: List of collection objects, fields under ``schema``

    Returns:
        Collections in the order received

    Raises:
        SchemaError: If the input does not have the expected shape
    """
    if not isinstance(raw_collections, list):
        raise SchemaError(
            f"Expected a list of collections, got {type(raw_collections).__name__}"
        )

    collections = []
    for raw in raw_collections:
        if not isinstance(raw, dict):
            raise SchemaError(f"Expected collection object, got {type(raw).__name__}")
        if "name" not in raw:
            raise SchemaError(f"Collection is missing 'name': {raw!r}")

        raw_fields = raw.get("schema") or []
        if not isinstance(raw_fields, list):
            raise SchemaError(
                f"Schema of collection '{raw['name']}' must be a list, "
                f"got {type(raw_fields).__name__}"
            )

        collections.append(
            Collection(
                name=str(raw["name"]),
                fields=[convert_field(f) for f in raw_fields],
                id=raw.get("id"),
                type=raw.get("type"),
            )
        )

    return collections


def collections_to_dicts(collections: List[Collection]) -> List[Dict[str, Any]]:
    """Serialize a schema model back to its JSON-compatible form."""
    return [c.to_dict() for c in collections]
