"""
Emitter core.

Provides the deferred construction engine (placeholders, the join builder,
value extraction) and the framework that drives a language emitter over a
schema program.
"""

from .errors import (
    DoubleResolutionError,
    EmitterError,
    NodeKindMismatchError,
    UnresolvedValueError,
    UnsupportedTypeError,
    compiler_assert,
    compiler_fail,
)
from .placeholder import Placeholder
from .entities import (
    Declaration,
    EmitEntity,
    EmittedSourceFile,
    RawCode,
    ResultFactory,
    Scope,
    SourceFile,
)
from .builder import build, extract_resolved, extract_value, is_placeholder
from .config import ConfigError, ConfigManager, EmitterConfig, load_config
from .framework import AssetEmitter, TypeEmitter

__all__ = [
    # Error taxonomy
    "EmitterError",
    "UnresolvedValueError",
    "UnsupportedTypeError",
    "NodeKindMismatchError",
    "DoubleResolutionError",
    "compiler_assert",
    "compiler_fail",
    # Deferred construction
    "Placeholder",
    "build",
    "extract_value",
    "extract_resolved",
    "is_placeholder",
    # Entities
    "Declaration",
    "EmitEntity",
    "EmittedSourceFile",
    "RawCode",
    "ResultFactory",
    "Scope",
    "SourceFile",
    # Configuration
    "ConfigError",
    "ConfigManager",
    "EmitterConfig",
    "load_config",
    # Framework
    "AssetEmitter",
    "TypeEmitter",
]
