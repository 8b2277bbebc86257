"""
Code generation for PocketBase schemas.

Turns a list of collections into TypeScript record typings.
"""

from typing import List, Optional

from .core.generator import (
    CodeGenerator,
    GeneratorError,
    GenerationResult,
    UnknownFieldTypeError,
    generate_code,
)
from .core.schema import Collection, Field, FieldType, SchemaError, convert_collections
from .core.config import ConfigError, ConfigManager, GeneratorConfig, load_config
from .core.naming import to_pascal_case
from .languages.typescript import (
    TypeScriptGenerator,
    TypeScriptTypeMapper,
    create_typescript_generator,
    sanitize_field_name,
)


def generate(
    collections: List[Collection], config: Optional[GeneratorConfig] = None
) -> str:
    """
    Generate the TypeScript typings document for a schema.

    Args:
        collections: Schema model in source order
        config: Generator configuration (defaults when omitted)

    Returns:
        Generated document

    Raises:
        UnknownFieldTypeError: If a field declares an unsupported type
    """
    return TypeScriptGenerator(config).generate(collections)


__all__ = [
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "UnknownFieldTypeError",
    "generate_code",
    "generate",
    "Collection",
    "Field",
    "FieldType",
    "SchemaError",
    "convert_collections",
    "ConfigError",
    "ConfigManager",
    "GeneratorConfig",
    "load_config",
    "to_pascal_case",
    "sanitize_field_name",
    "TypeScriptGenerator",
    "TypeScriptTypeMapper",
    "create_typescript_generator",
]
