"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from pathlib import Path
from typing import Dict, Any, List, Optional, Union, get_origin
from dataclasses import dataclass, field, fields


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


DEFAULT_HEADER = "// This file was @generated using pocketbase-typegen"
DEFAULT_OUTPUT_FILE = "pocketbase-types.ts"

RECORD_TYPE_ORDERS = {"text", "name"}

_TYPE_NAMES = {str: "a string", dict: "an object"}


@dataclass
class GeneratorConfig:
    """Settings passed to a generator."""

    # Output settings
    output_file: str = DEFAULT_OUTPUT_FILE
    header: str = DEFAULT_HEADER

    # Code style settings
    indent: str = "\t"

    # Declaration names
    enum_name: str = "Collections"
    records_type_name: str = "CollectionRecords"
    record_suffix: str = "Record"

    # "text" sorts record declarations by their rendered text,
    # "name" by collection name
    record_type_order: str = "text"

    # Declared field type -> fixed type expression, checked before built-ins
    type_overrides: Dict[str, str] = field(default_factory=dict)

    # Unrecognized settings from config files
    custom: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Manages configuration loading and merging."""

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete generator configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Defaults merged with the file, then with the overrides
        """
        base_config: Dict[str, Any] = {}

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name: f for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                expected = get_origin(known_fields[key].type) or known_fields[key].type
                if not isinstance(value, expected):
                    raise ConfigError(
                        f"{key} must be {_TYPE_NAMES.get(expected, expected.__name__)}, "
                        f"got {type(value).__name__}"
                    )
                config_args[key] = value
            else:
                custom_args[key] = value

        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        for type_name, expression in config_args.get("type_overrides", {}).items():
            if not isinstance(expression, str):
                raise ConfigError(
                    f"type_overrides entry {type_name!r} must be a string, "
                    f"got {type(expression).__name__}"
                )

        order = config_args.get("record_type_order", "text")
        if order not in RECORD_TYPE_ORDERS:
            raise ConfigError(
                f"Invalid record_type_order: {order!r} "
                f"(expected one of: {', '.join(sorted(RECORD_TYPE_ORDERS))})"
            )

        return GeneratorConfig(**config_args)

    def validate_config(
        self, config: GeneratorConfig, builtin_types: Optional[List[str]] = None
    ) -> List[str]:
        """
        Validate a configuration.

        Args:
            config: Configuration to check
            builtin_types: Field types the generator renders natively

        Returns:
            List of validation warnings
        """
        warnings = []

        for setting in ("enum_name", "records_type_name"):
            value = getattr(config, setting)
            if not value or not value.isidentifier():
                warnings.append(f"Invalid {setting}: {value!r}")

        for type_name in sorted(set(config.type_overrides) & set(builtin_types or [])):
            warnings.append(f"type_overrides replaces built-in type '{type_name}'")

        for key in sorted(config.custom):
            warnings.append(f"Unknown setting ignored: {key}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)
