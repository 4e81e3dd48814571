"""
Configuration management for the emitter.

Handles loading and merging configuration from JSON files,
providing defaults and validation for emitter settings.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class EmitterConfig:
    """Settings for TypeScript emission."""

    # Output settings
    output_file: str = "models.ts"
    output_dir: str = "."

    # Code style settings
    indent_size: int = 4
    export_declarations: bool = False

    # Header comment
    add_header_comment: bool = True
    header_text: str = "Generated by schema_ts. Do not edit."

    # Synthetic key name for additional-properties index signatures
    indexer_key_name: str = "key"

    # Unrecognized settings
    custom: Dict[str, Any] = field(default_factory=dict)


DEFAULT_CONFIG: Dict[str, Any] = {
    "output_file": "models.ts",
    "indent_size": 4,
    "export_declarations": False,
    "add_header_comment": True,
}


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self, defaults: Optional[Dict[str, Any]] = None):
        self._defaults = dict(DEFAULT_CONFIG if defaults is None else defaults)

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> EmitterConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        base_config = self._defaults.copy()

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

        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration file %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> EmitterConfig:
        """Convert dictionary to EmitterConfig instance."""
        known_fields = {f.name for f in fields(EmitterConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        indent_size = config_args.get("indent_size", 4)
        if isinstance(indent_size, bool) or not isinstance(indent_size, int) or indent_size < 0:
            raise ConfigError(
                f"indent_size must be a non-negative integer, got {indent_size!r}"
            )

        return EmitterConfig(**config_args)

    def save_config(self, config: EmitterConfig, output_path: Union[str, Path]) -> None:
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: EmitterConfig) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if not isinstance(config.indent_size, int) or config.indent_size < 0:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        if not config.output_file or not str(config.output_file).endswith(".ts"):
            warnings.append(f"Output file should have a .ts extension: {config.output_file}")

        if not str(config.indexer_key_name).isidentifier():
            warnings.append(f"Invalid indexer_key_name: {config.indexer_key_name}")

        for key in config.custom:
            warnings.append(f"Unknown configuration key: {key}")

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
) -> EmitterConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    return get_config_manager().get_config(custom_config, config_file)
