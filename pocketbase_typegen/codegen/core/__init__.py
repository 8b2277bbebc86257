"""
Core code generation components.

Provides base classes and utilities used by the language generators.
"""

from .generator import (
    CodeGenerator,
    GeneratorError,
    GenerationResult,
    UnknownFieldTypeError,
    generate_code,
)
from .schema import (
    Collection,
    Field,
    FieldType,
    SchemaError,
    collections_to_dicts,
    convert_collections,
)
from .naming import to_pascal_case
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "UnknownFieldTypeError",
    "generate_code",
    # Schema model
    "Collection",
    "Field",
    "FieldType",
    "SchemaError",
    "collections_to_dicts",
    "convert_collections",
    # Naming
    "to_pascal_case",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
