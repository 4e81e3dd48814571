"""
schema_ts - TypeScript type declarations from typed schema graphs.

Loads a schema document (models, properties, scalars, unions, arrays,
intrinsics) and emits one ``type`` alias per model, handling circular
references between models.
"""

from .emitter import (
    AssetEmitter,
    ConfigError,
    EmitterConfig,
    EmitterError,
    load_config,
)
from .generator import (
    GenerationResult,
    collect_warnings,
    emit_document,
    emit_program,
    generate_typescript,
)
from .schema import SchemaError, SchemaProgram, load_program
from .typescript import TypeScriptEmitter
from .utils import SchemaLoadError, load_schema

__version__ = "0.1.0"


def generate_from_file(path, config=None, output_dir=None, write=True):
    """
    Load the schema stored at ``path`` and generate TypeScript.

    Returns:
        GenerationResult with generated files, or the load failure
    """
    try:
        program = load_schema(file_path=path)
    except SchemaLoadError as e:
        return GenerationResult.error(str(e), exception=e)
    return generate_typescript(program, config, output_dir=output_dir, write=write)


__all__ = [
    "AssetEmitter",
    "ConfigError",
    "EmitterConfig",
    "EmitterError",
    "GenerationResult",
    "SchemaError",
    "SchemaLoadError",
    "SchemaProgram",
    "TypeScriptEmitter",
    "collect_warnings",
    "emit_document",
    "emit_program",
    "generate_from_file",
    "generate_typescript",
    "load_config",
    "load_program",
    "load_schema",
]
