"""
Top-level generation entry points.

Wraps the emitter framework with schema loading, validation warnings and
result reporting.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .emitter.config import ConfigError, EmitterConfig, load_config
from .emitter.errors import EmitterError
from .emitter.framework import AssetEmitter
from .logging_config import get_logger
from .schema.loader import SchemaError, load_program
from .schema.types import Model, SchemaProgram
from .typescript.emitter import TypeScriptEmitter
from .typescript.naming import (
    RENAME_CLASH,
    RENAME_INVALID,
    RENAME_RESERVED,
    DeclarationNamer,
    is_valid_identifier,
)

logger = get_logger(__name__)

ConfigLike = Optional[Union[EmitterConfig, Dict[str, Any], str, Path]]


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        files: Dict[str, str],
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            files: Output path -> rendered contents
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.files = files
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None
        self.written: List[Path] = []

    @property
    def code(self) -> str:
        """Contents of the first (usually only) output file."""
        return next(iter(self.files.values()), "")

    @classmethod
    def error(cls, message: str, exception: Optional[Exception] = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(files={})
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def resolve_config(config: ConfigLike = None) -> EmitterConfig:
    """Accept a config object, override dict, or JSON config file path."""
    if isinstance(config, EmitterConfig):
        return config
    if isinstance(config, (str, Path)):
        return load_config(config_file=config)
    if isinstance(config, dict):
        return load_config(custom_config=config)
    return load_config()


_RENAME_MESSAGES = {
    RENAME_INVALID: "to form a valid identifier",
    RENAME_RESERVED: "to avoid a TypeScript reserved word",
    RENAME_CLASH: "to avoid a clash with another declaration name",
}


def collect_warnings(
    program: SchemaProgram, namer: Optional[DeclarationNamer] = None
) -> List[str]:
    """
    Check a program for constructs that emit, but probably not as intended.

    Args:
        program: Loaded program
        namer: Namer holding the names actually assigned during emission.
            Without one, names are assigned in document order.

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []
    if namer is None:
        namer = DeclarationNamer()
        for model in program.iter_models():
            namer.name_for(model.name)

    def check_model(model: Model, context: str) -> None:
        if not model.properties and model.indexer is None and model.base_model is None:
            warnings.append(f"Model {context} has no properties")
        for prop in model.properties.values():
            if not is_valid_identifier(prop.name):
                warnings.append(
                    f"Property {context}.{prop.name} is not an identifier and will be quoted"
                )

    for model in program.iter_models():
        check_model(model, model.name)
        reason = namer.rename_reason(model.name)
        if reason is not None:
            warnings.append(
                f"Model {model.name} renamed to {namer.assigned_name(model.name)} "
                f"{_RENAME_MESSAGES[reason]}"
            )

    return warnings


def emit_program(
    program: SchemaProgram,
    config: ConfigLike = None,
    output_dir: Optional[Union[str, Path]] = None,
    write: bool = False,
) -> GenerationResult:
    """
    Emit TypeScript for a loaded program.

    Raises:
        ConfigError: If ``config`` is invalid
        EmitterError: On any emission failure
    """
    emitter_config = resolve_config(config)
    asset_emitter = AssetEmitter(program, TypeScriptEmitter, emitter_config)
    asset_emitter.emit_program()

    emitted = asset_emitter.render_output()
    files = {ef.path: ef.contents for ef in emitted}

    metadata = {
        "language": "typescript",
        "file_extension": ".ts",
        "model_count": len(program.models),
        "source": program.source,
        "files": list(files),
    }
    warnings = collect_warnings(program, asset_emitter.type_emitter.namer)
    result = GenerationResult(files, warnings, metadata)

    if write:
        result.written = asset_emitter.write_output(output_dir, emitted)

    return result


def emit_document(
    document: Dict[str, Any],
    config: ConfigLike = None,
    source: Optional[str] = None,
) -> Dict[str, str]:
    """
    Emit TypeScript for a schema document and return the rendered files.

    Raises:
        SchemaError: If the document is malformed
        EmitterError: On any emission failure
    """
    program = load_program(document, source)
    return emit_program(program, config).files


def generate_typescript(
    document: Union[Dict[str, Any], SchemaProgram],
    config: ConfigLike = None,
    output_dir: Optional[Union[str, Path]] = None,
    write: bool = False,
    source: Optional[str] = None,
) -> GenerationResult:
    """
    Generate TypeScript with error handling.

    Args:
        document: Schema document or an already loaded program
        config: Configuration object, override dict or config file path
        output_dir: Directory for written files (defaults to config.output_dir)
        write: Write the files to disk
        source: Description of where the document came from

    Returns:
        GenerationResult with files, warnings, and metadata
    """
    try:
        if isinstance(document, SchemaProgram):
            program = document
        else:
            program = load_program(document, source)
        return emit_program(program, config, output_dir, write)
    except SchemaError as e:
        logger.error("Invalid schema: %s", e)
        return GenerationResult.error(f"Invalid schema: {e}", exception=e)
    except EmitterError as e:
        logger.error("Emission failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return GenerationResult.error(f"Invalid configuration: {e}", exception=e)
