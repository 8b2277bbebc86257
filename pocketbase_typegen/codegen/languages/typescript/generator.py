"""
TypeScript code generator implementation.

Generates a collections enum, one record type per collection and a
collection-to-record lookup type from a PocketBase schema.
"""

from pathlib import Path
from typing import List, Optional

from ....logging_config import get_logger
from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator
from ...core.schema import Collection
from .naming import record_type_name, sanitize_field_name
from .types import TypeScriptTypeMapper

logger = get_logger(__name__)


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript record typings."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize TypeScript generator with configuration."""
        super().__init__(config)
        self.type_mapper = TypeScriptTypeMapper(self.config.type_overrides)

    def get_template_directory(self) -> Optional[Path]:
        """Return the TypeScript templates directory."""
        return Path(__file__).parent / "templates"

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "typescript"

    @property
    def file_extension(self) -> str:
        """Return TypeScript file extension."""
        return ".ts"

    def sanitize_member_name(self, name: str) -> str:
        """Quote member names that start with a digit."""
        return sanitize_field_name(name)

    def generate(self, collections: List[Collection]) -> str:
        """
        Generate the complete typings document.

        Record types are rendered for every collection with fields. By
        default they are ordered by their rendered text, which keeps output
        identical to earlier releases; ``record_type_order = "name"`` orders
        them by collection name instead.
        """
        collection_names = sorted(c.name for c in collections if c.name)

        with_fields = [c for c in collections if c.fields]
        if self.config.record_type_order == "name":
            with_fields.sort(key=lambda c: c.name)
            record_types = [self.generate_record_type(c) for c in with_fields]
        else:
            record_types = sorted(self.generate_record_type(c) for c in with_fields)

        logger.debug(
            "Rendered %d record type(s) for %d collection name(s)",
            len(record_types),
            len(collection_names),
        )

        parts = [
            self.config.header,
            self.generate_collections_enum(collection_names),
            *record_types,
            self.generate_collection_records(collection_names),
        ]
        return "\n\n".join(parts)

    def generate_record_type(self, collection: Collection) -> str:
        """Generate the record type declaration for one collection."""
        context = {
            "type_name": record_type_name(collection.name, self.config.record_suffix),
            "members": [self.type_mapper.render_member(f) for f in collection.fields],
            "indent": self.config.indent,
        }
        return self.render_template("record_type.ts.j2", context)

    def generate_collections_enum(self, collection_names: List[str]) -> str:
        """Generate the enum mapping PascalCase members to collection names."""
        context = {
            "enum_name": self.config.enum_name,
            "collection_names": collection_names,
            "indent": self.config.indent,
        }
        return self.render_template("collections_enum.ts.j2", context)

    def generate_collection_records(self, collection_names: List[str]) -> str:
        """Generate the type binding each collection name to its record type."""
        context = {
            "records_type_name": self.config.records_type_name,
            "record_suffix": self.config.record_suffix,
            "collection_names": collection_names,
            "indent": self.config.indent,
        }
        return self.render_template("collection_records.ts.j2", context)


def create_typescript_generator(**options) -> TypeScriptGenerator:
    """
    Create a TypeScript generator from keyword settings.

    Args:
        **options: Any GeneratorConfig field, e.g. ``record_type_order="name"``

    Returns:
        Configured TypeScriptGenerator instance
    """
    return TypeScriptGenerator(load_config(custom_config=options))
