"""
Base generator interface for all code generation targets.

Defines the contract that language generators implement, and the
error-handling wrapper used by the CLI.
"""

from abc import ABC, abstractmethod
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...logging_config import get_logger
from .config import GeneratorConfig, load_config
from .schema import Collection
from .templates import TemplateEngine, TemplateError, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class UnknownFieldTypeError(GeneratorError):
    """Raised when a field declares a type with no rendering rule."""

    def __init__(self, field_type: str, field_name: str = ""):
        self.field_type = field_type
        self.field_name = field_name
        super().__init__(f"unknown type {field_type} found in schema")


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or load_config()
        self._template_engine = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'typescript')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.ts')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Returns:
            Path to template directory or None
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator, creating it on first use."""
        if self._template_engine is None:
            self._template_engine = create_template_engine(
                self.get_template_directory()
            )
        return self._template_engine

    @abstractmethod
    def generate(self, collections: List[Collection]) -> str:
        """
        Generate the complete output document.

        Args:
            collections: Schema model in source order

        Returns:
            Generated code as a string

        Raises:
            GeneratorError: If any part of the schema cannot be rendered
        """
        pass

    @abstractmethod
    def generate_record_type(self, collection: Collection) -> str:
        """
        Generate the type declaration for a single collection.

        Args:
            collection: Collection to generate code for

        Returns:
            Generated declaration for this collection only
        """
        pass

    def sanitize_member_name(self, name: str) -> str:
        """Return the member name as it will appear in generated code."""
        return name

    def validate_schemas(self, collections: List[Collection]) -> List[str]:
        """
        Report structural issues in the schema model.

        The warnings are informational; generation output does not change.

        Args:
            collections: Collections to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        name_counts = Counter(c.name for c in collections if c.name)
        for name, count in sorted(name_counts.items()):
            if count > 1:
                warnings.append(f"Collection '{name}' is defined {count} times")

        for collection in collections:
            if not collection.name:
                warnings.append("Collection with an empty name is left out of the index")
                continue

            if not collection.fields:
                warnings.append(
                    f"Collection '{collection.name}' has no fields, "
                    "no record type is generated for it"
                )
                continue

            member_counts = Counter(
                self.sanitize_member_name(f.name) for f in collection.fields
            )
            for member, count in member_counts.items():
                if count > 1:
                    warnings.append(
                        f"Field '{member}' appears {count} times in '{collection.name}'"
                    )

        return warnings

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator, collections: List[Collection]
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        collections: Schema model to generate code for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_schemas(collections)
        for warning in warnings:
            logger.debug("Schema warning: %s", warning)

        code = generator.generate(collections)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "collection_count": len(collections),
            "field_count": sum(len(c.fields) for c in collections),
            "record_type_count": sum(1 for c in collections if c.fields),
        }
        logger.info(
            "Generated %s code for %d collection(s)",
            generator.language_name,
            len(collections),
        )

        return GenerationResult(code, warnings, metadata)

    except (GeneratorError, TemplateError) as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
