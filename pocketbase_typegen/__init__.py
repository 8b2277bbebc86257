"""
pocketbase-typegen

Generate TypeScript typings for PocketBase records from a database file,
an exported JSON schema or a running instance.
"""

from .codegen import (
    Collection,
    Field,
    FieldType,
    GeneratorConfig,
    GeneratorError,
    UnknownFieldTypeError,
    convert_collections,
    generate,
    generate_code,
    load_config,
)
from .sources import (
    ApiSource,
    DatabaseSource,
    JsonFileSource,
    SchemaLoaderError,
    SchemaSource,
    load_schema,
)

__version__ = "1.0.9"

__all__ = [
    "Collection",
    "Field",
    "FieldType",
    "GeneratorConfig",
    "GeneratorError",
    "UnknownFieldTypeError",
    "convert_collections",
    "generate",
    "generate_code",
    "load_config",
    "ApiSource",
    "DatabaseSource",
    "JsonFileSource",
    "SchemaLoaderError",
    "SchemaSource",
    "load_schema",
    "__version__",
]
